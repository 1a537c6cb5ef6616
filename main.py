#!/usr/bin/env python3
"""
Inquiry Interview - Main Entry Point.

Usage:
    python main.py          # Run the FastAPI server
    python main.py --cli    # Run an interview in the terminal
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path


def setup_python_path():
    """Add project root to Python path."""
    project_root = Path(__file__).parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


def run_server(host: str = None, port: int = None):
    """Launch the FastAPI server with uvicorn."""
    import uvicorn
    from inquiry_interview.core.config import configure_logging

    # Configure logging before starting server
    configure_logging()

    if host is None:
        host = os.getenv("HOST", "127.0.0.1")

    if port is None:
        port = int(os.getenv("PORT", "8000"))

    print("\n" + "=" * 60)
    print("🎓  Inquiry Interview - Entrance Interview Practice")
    print("=" * 60)
    print(f"\n📚 API Docs: http://{host}:{port}/api/docs")
    print("\nPress Ctrl+C to stop the server\n")

    uvicorn.run(
        "inquiry_interview.api.app:app",
        host=host,
        port=port,
        workers=1,
        log_level="info",
        access_log=False,  # Reduce log noise
    )


async def run_cli_interview():
    """Run a full interview in the terminal."""
    setup_python_path()

    from inquiry_interview.app.engine import create_engine
    from inquiry_interview.app.guard import ResponseGuard
    from inquiry_interview.app.renderer import QuestionRenderer
    from inquiry_interview.core.config import configure_logging
    from inquiry_interview.core.domain.models import Turn, TurnInput
    from inquiry_interview.core.prompts import SERIOUS_REMINDER

    configure_logging()
    logger = logging.getLogger(__name__)

    print("\n" + "=" * 60)
    print("🎓  Inquiry Interview - CLI")
    print("=" * 60 + "\n")

    try:
        engine = create_engine()
        renderer = QuestionRenderer()
        guard = ResponseGuard()

        activity = input("📋 Describe your inquiry activity: ").strip()
        if not activity:
            activity = "I practice soccer every day with my team and keep records of my training."
            print(f"   (Using sample activity: {activity})")

        category = engine.classify(activity)
        keyword = engine.keyword_for(activity, category)
        print(f"\n🏷️  Interview style: {category.value}")
        print("   Type 'quit' to end the interview.\n")
        print("-" * 60 + "\n")

        transcript: tuple[Turn, ...] = ()
        decision = engine.decide(TurnInput(activity_text=activity, category=category))

        while True:
            rendered = await renderer.render(
                decision.question,
                category=decision.category,
                phase=decision.phase,
                activity_text=activity,
                latest_response=transcript[-1].response if transcript else "",
                depth=decision.depth,
                keyword=keyword,
            )
            if decision.advanced_to:
                print(f"➡️  Moving on to the {decision.advanced_to.value} phase\n")
            print(f"🎯 [{decision.phase.value}] {rendered.text}")

            answer = input("💬 Your answer: ").strip()
            if answer.lower() in ("quit", "exit"):
                break

            while guard.is_not_serious(rendered.text, answer):
                print(f"\n🙅 {SERIOUS_REMINDER.format(question=rendered.text)}")
                answer = input("💬 Your answer: ").strip()

            transcript = transcript + (Turn(question_id=decision.question.id, response=answer),)
            print(f"   (depth: {engine.analyze(answer).depth.value})\n")

            decision = engine.decide(TurnInput(
                activity_text=activity,
                transcript=transcript,
                phase=decision.phase,
                depth=decision.depth,
                category=decision.category,
            ))

            if decision.phase.is_terminal and decision.exhausted:
                break

        print("\n" + "=" * 60)
        print("🏁 Interview Complete!")
        print(f"   Questions answered: {len(transcript)}")
        print(f"   Final phase: {decision.phase.value}")
        print("=" * 60 + "\n")

    except KeyboardInterrupt:
        print("\n👋 Interview interrupted")
    except Exception as e:
        logger.error(f"Interview error: {e}", exc_info=True)
        print(f"\n❌ Error: {e}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Inquiry Interview - Entrance Interview Practice"
    )
    parser.add_argument(
        "--cli",
        action="store_true",
        help="Run an interview in the terminal instead of the web server",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind the server (default: HOST or 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server (default: PORT or 8000)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    setup_python_path()

    if args.debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    if args.cli:
        asyncio.run(run_cli_interview())
    else:
        run_server(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
