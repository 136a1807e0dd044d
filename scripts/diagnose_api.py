import argparse
import time

from callscribe.completion import CompletionRequest, build_completion_service
from callscribe.config import load_config_or_default, resolve_api_key


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="callscribe_config.yml", help="Config path.")
    parser.add_argument("--model", help="Override the model name.")
    args = parser.parse_args()

    cfg = load_config_or_default(args.config)
    if args.model:
        cfg.service.model = args.model
    api_key = resolve_api_key(cfg)
    if not api_key:
        print(f"No API key. Set {cfg.service.api_key_env} or GEMINI_API_KEY.")
        return 1

    service = build_completion_service(api_key, cfg.service)
    request = CompletionRequest(
        contents="Say hello.",
        system_instruction="Reply with a JSON object.",
        response_schema={
            "type": "OBJECT",
            "properties": {"reply": {"type": "STRING"}},
            "required": ["reply"],
        },
    )
    started = time.time()
    text = service.invoke(request)
    elapsed = time.time() - started
    print(f"Model: {cfg.service.model}")
    print(f"Response: {text!r}")
    print(f"Elapsed: {elapsed:.2f}s")
    return 0 if text.strip() else 1


if __name__ == "__main__":
    raise SystemExit(main())
