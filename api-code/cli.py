from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from env_loader import create_env_file, load_local_env
from services import GeminiCompletionProvider, ProviderError, mask_api_key
from settings import Settings, is_usable_api_key


DEFAULT_PROBE_MODELS = ("gemini-1.5-flash", "gemini-2.0-flash")
API_KEY_URL = "https://aistudio.google.com/app/apikey"


def _require_key(settings: Settings) -> bool:
    if is_usable_api_key(settings.gemini_api_key):
        return True
    print("ERROR: API key not configured!", file=sys.stderr)
    print("Please set a valid Gemini API key in your .env file.", file=sys.stderr)
    print(f"Get your API key from: {API_KEY_URL}", file=sys.stderr)
    return False


async def check_key(settings: Settings, prompt: str = "Say hello") -> bool:
    if not _require_key(settings):
        return False

    print(f"API Key: {mask_api_key(settings.gemini_api_key)}")
    print(f"Testing Gemini API with {settings.gemini_model}...")
    provider = GeminiCompletionProvider(settings.gemini_api_key, settings.gemini_model)
    try:
        response = await provider.complete(prompt)
    except ProviderError as exc:
        print(f"API Error: {exc}", file=sys.stderr)
        print("Possible reasons: the key is invalid or expired, the quota is exhausted,", file=sys.stderr)
        print("or the Gemini API is currently unavailable.", file=sys.stderr)
        return False

    print("API working! Response:")
    print(response)
    return True


async def probe_models(settings: Settings, models: Sequence[str]) -> List[str]:
    """Send a short prompt to each model and return the names that answered."""
    working: List[str] = []
    for model_name in models:
        provider = GeminiCompletionProvider(settings.gemini_api_key, model_name)
        print(f"Testing with {model_name}...")
        try:
            response = await provider.complete("Hello")
        except ProviderError as exc:
            print(f"{model_name} error: {exc}")
            continue
        print(f"{model_name} works: {response}")
        working.append(model_name)
    return working


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chat-widget",
        description="Operator tooling for the company chat widget backend.",
    )
    parser.add_argument("--env-file", default=".env", help="Path of the .env file to load.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_env = subparsers.add_parser("init-env", help="Create .env from env.example.")
    init_env.add_argument("--example", default="env.example", help="Template to copy.")

    subparsers.add_parser("check-key", help="Verify the Gemini API key with a test prompt.")

    probe = subparsers.add_parser("probe-models", help="Check which Gemini models answer.")
    probe.add_argument("models", nargs="*", default=list(DEFAULT_PROBE_MODELS))

    serve = subparsers.add_parser("serve", help="Run the chat proxy with uvicorn.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    if args.command == "init-env":
        try:
            created = create_env_file(args.env_file, args.example)
        except FileNotFoundError as exc:
            print(f"{exc}", file=sys.stderr)
            return 1
        if created:
            print(f"Created {args.env_file} from {args.example}")
            print(f"Edit it and add your Gemini API key (get one from {API_KEY_URL}).")
        else:
            print(f"{args.env_file} already exists")
        return 0

    load_local_env(args.env_file)
    settings = Settings.from_env()

    if args.command == "check-key":
        return 0 if asyncio.run(check_key(settings)) else 1

    if args.command == "probe-models":
        if not _require_key(settings):
            return 1
        working = asyncio.run(probe_models(settings, args.models))
        return 0 if working else 1

    import uvicorn

    from application import create_app

    logging.getLogger().setLevel(settings.log_level.upper())
    uvicorn.run(
        create_app(settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
