#!/usr/bin/env python3
"""
Interactive prompt-tree session
Asks a question list from a JSON file, one question at a time
"""

import argparse
import asyncio
import json
import logging
import os
import sys

from prompt_tree import ConsoleAsker, Profile, PromptResolver, load_questions, render_dot, to_dot


def parse_seed(pairs):
    """Turn KEY=VALUE strings into a seed dict (true/false become booleans)"""
    seed = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Seed entry must look like KEY=VALUE: {pair!r}")
        key, value = pair.split("=", 1)
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            seed[key.strip()] = lowered == "true"
        else:
            seed[key.strip()] = value
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask a branching question list")
    parser.add_argument("questions", help="JSON file holding a list of questions")
    parser.add_argument(
        "--profile",
        default=os.getenv("PROMPT_TREE_PROFILE"),
        help="JSON object of known answers (default: $PROMPT_TREE_PROFILE)",
    )
    parser.add_argument("--seed", nargs="*", default=[], metavar="KEY=VALUE")
    parser.add_argument("--dot", help="Write the prompt tree as DOT to this path and exit")
    parser.add_argument(
        "--render",
        metavar="IMAGE",
        help="Render the prompt tree to this image (format from extension, e.g. tree.svg) and exit",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        questions = load_questions(args.questions)
        profile = Profile.from_file(args.profile) if args.profile else Profile()
        seed = parse_seed(args.seed)
    except (OSError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.dot or args.render:
        if args.dot:
            with open(args.dot, "w") as f:
                f.write(to_dot(questions) + "\n")
            print(f"✓ Prompt tree saved to: {args.dot}")
        if args.render:
            try:
                image = render_dot(to_dot(questions), args.render)
            except RuntimeError as e:
                print(f"❌ {e}", file=sys.stderr)
                return 1
            print(f"✓ Prompt tree rendered to: {image}")
        return 0

    resolver = PromptResolver(profile=profile, ask=ConsoleAsker())
    try:
        answers = asyncio.run(resolver.resolve(questions, seed))
    except (KeyboardInterrupt, EOFError):
        print("\n\n❌ Session interrupted")
        return 130

    print(json.dumps(answers, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
