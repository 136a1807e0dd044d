"""CLI entry point."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional
import yaml

from .completion import build_completion_service
from .config import Config, load_config_or_default, resolve_api_key, save_config
from .errors import CallscribeError, ConfigurationError
from .extractor import ExtractionClient
from .logging_utils import parse_level, setup_logging
from .models import SETTING_CHOICES, GenerationSettings
from .prompts import build_generation_instruction
from .renderer import render_analysis, render_analysis_table, render_sequence
from .schemas import SCHEMA_VARIANTS
from .sequencer import SequenceGenerationClient

DEFAULT_CONFIG = "callscribe_config.yml"


def _add_setting_args(cmd: argparse.ArgumentParser) -> None:
    for name, choices in SETTING_CHOICES.items():
        cmd.add_argument(f"--{name}", choices=list(choices), help=f"Email {name}.")
    cmd.add_argument(
        "--variant", choices=sorted(SCHEMA_VARIANTS), help="Email schema variant."
    )


def _settings_from_args(cfg: Config, args: argparse.Namespace) -> GenerationSettings:
    overrides = {
        name: getattr(args, name)
        for name in SETTING_CHOICES
        if getattr(args, name, None) is not None
    }
    return cfg.email.settings.replace(**overrides)


def _read_transcript(path: Optional[str]) -> str:
    if path and path != "-":
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    return sys.stdin.read()


def _emit(text: str, out: Optional[str]) -> None:
    if out:
        with open(out, "w", encoding="utf-8") as handle:
            handle.write(text)
        print(f"Wrote {out}")
    else:
        print(text)


def _service(cfg: Config, api_key: Optional[str]):
    if not api_key:
        return None
    try:
        return build_completion_service(api_key, cfg.service)
    except Exception as exc:
        raise ConfigurationError(f"Could not set up the completion service: {exc}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="callscribe")
    sub = parser.add_subparsers(dest="command")

    analyze_cmd = sub.add_parser("analyze")
    analyze_cmd.add_argument("transcript", nargs="?", help="Transcript file (stdin if omitted).")
    analyze_cmd.add_argument("--config", default=DEFAULT_CONFIG, help="Config.")
    analyze_cmd.add_argument(
        "--format",
        choices=["markdown", "table", "json"],
        default="markdown",
        help="Output format.",
    )
    analyze_cmd.add_argument("--out", help="Write the result to a file.")

    emails_cmd = sub.add_parser("emails")
    emails_cmd.add_argument("transcript", nargs="?", help="Transcript file (stdin if omitted).")
    emails_cmd.add_argument("--config", default=DEFAULT_CONFIG, help="Config.")
    emails_cmd.add_argument(
        "--format", choices=["markdown", "json"], default="markdown", help="Output format."
    )
    emails_cmd.add_argument("--out", help="Write the result to a file.")
    _add_setting_args(emails_cmd)

    prompt_cmd = sub.add_parser("prompt")
    prompt_cmd.add_argument("--config", default=DEFAULT_CONFIG, help="Config.")
    _add_setting_args(prompt_cmd)

    config_cmd = sub.add_parser("config")
    config_cmd.add_argument("--config", default=DEFAULT_CONFIG, help="Config path to write.")
    config_cmd.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file."
    )

    args = parser.parse_args(argv)

    if args.command == "config":
        if os.path.exists(args.config) and not args.force:
            print(f"{args.config} already exists. Use --force to overwrite it.")
            return 1
        save_config(args.config, Config())
        print(f"Wrote {args.config}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    try:
        cfg = load_config_or_default(args.config)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"Could not load config {args.config}: {exc}")
        return 1
    logger, _log_path = setup_logging(cfg.log_dir, parse_level(cfg.log_level))

    if args.command == "prompt":
        settings = _settings_from_args(cfg, args)
        try:
            print(build_generation_instruction(settings, args.variant or cfg.email.schema_variant))
        except ConfigurationError as exc:
            print(exc)
            return 1
        return 0

    try:
        transcript = _read_transcript(args.transcript)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read transcript: %s", exc)
        print(f"Could not read transcript: {exc}")
        return 1
    if not transcript.strip():
        print("Please paste a transcript first.")
        return 2

    api_key = resolve_api_key(cfg)

    if args.command == "analyze":
        try:
            client = ExtractionClient(_service(cfg, api_key), api_key)
            record = client.extract(transcript)
        except CallscribeError as exc:
            logger.error("Analyze failed: %s", exc)
            if isinstance(exc, ConfigurationError):
                print("Failed to analyze transcript. Please check your API key.")
            else:
                print(f"Failed to analyze transcript: {exc}")
            return 1
        if args.format == "json":
            text = json.dumps(record.to_payload(), indent=2, ensure_ascii=False)
        elif args.format == "table":
            text = render_analysis_table(record)
        else:
            text = render_analysis(record)
        _emit(text, args.out)
        return 0

    if args.command == "emails":
        settings = _settings_from_args(cfg, args)
        try:
            client = SequenceGenerationClient(
                _service(cfg, api_key),
                api_key,
                variant=args.variant or cfg.email.schema_variant,
            )
            drafts = client.generate(transcript, settings)
        except CallscribeError as exc:
            logger.error("Email generation failed: %s", exc)
            print(f"Failed to generate emails: {exc}")
            return 1
        if args.format == "json":
            payload = {"emails": [draft.to_payload() for draft in drafts]}
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        else:
            text = render_sequence(drafts)
        _emit(text, args.out)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
