import argparse
import sys

from calclang.session import Session, run_repl


def main() -> None:
    parser = argparse.ArgumentParser(description="Calculator language with variables, strings and booleans")
    parser.add_argument("file", help="script to run line by line (if empty, starts the interactive prompt)", nargs="?")
    parser.add_argument("--no-color", action="store_true", help="never color error messages")
    parser.add_argument("--trace", action="store_true", help="print tokens and parsed statements to stderr")
    args = parser.parse_args()

    color = not args.no_color and sys.stdout.isatty()

    if args.file is not None:
        session = Session(color=color, trace=args.trace, source_name=args.file)
        # undecodable bytes become U+FFFD, which the tokenizer skips
        with open(args.file, "r", encoding="utf-8", errors="replace") as f:
            failed = session.run_file(f)
        sys.exit(1 if failed else 0)
    else:
        sys.stdin.reconfigure(errors="replace")  # type: ignore
        run_repl(Session(color=color, trace=args.trace))


if __name__ == "__main__":
    main()
