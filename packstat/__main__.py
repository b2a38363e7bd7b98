"""CLI entry point: python -m packstat <command>"""

import argparse
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="packstat",
        description="Top-K and last-K statistics over packed 12-bit streams",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- analyze ---
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a packed file and write a report")
    analyze_parser.add_argument("input", type=str, help="Packed binary input file")
    analyze_parser.add_argument("output", type=str, help="Report output file")
    analyze_parser.add_argument("-k", type=int, default=32, help="Collection capacity (default: 32)")
    analyze_parser.add_argument("--chunk-size", type=int, default=65536)
    analyze_parser.add_argument("-q", "--quiet", action="store_true", help="Skip the summary table")

    # --- show ---
    show_parser = subparsers.add_parser("show", help="Print both readouts without writing a report")
    show_parser.add_argument("input", type=str, help="Packed binary input file")
    show_parser.add_argument("-k", type=int, default=32)

    # --- pack ---
    pack_parser = subparsers.add_parser("pack", help="Pack 12-bit values into a binary file")
    pack_parser.add_argument("output", type=str, help="Output binary file")
    pack_parser.add_argument("values", type=int, nargs="*", help="Values in [0, 4095]")
    pack_parser.add_argument("--from-text", type=str, default=None,
                             help="Read whitespace-separated values from this file")

    # --- compare ---
    compare_parser = subparsers.add_parser("compare", help="Compare two report files")
    compare_parser.add_argument("expected", type=str)
    compare_parser.add_argument("actual", type=str)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from .cli_formatting import print_error
    from .errors import PackStatError

    try:
        if args.command == "analyze":
            status = _cmd_analyze(args)
        elif args.command == "show":
            status = _cmd_show(args)
        elif args.command == "pack":
            status = _cmd_pack(args)
        elif args.command == "compare":
            status = _cmd_compare(args)
    except (PackStatError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)
    sys.exit(status)


def _cmd_analyze(args):
    from .cli_formatting import print_summary
    from .config import PackStatConfig
    from .pipeline import analyze_file
    from .report import write_report

    config = PackStatConfig(k=args.k, chunk_size=args.chunk_size)
    result = analyze_file(args.input, config=config)
    write_report(result, args.output, config)
    if not args.quiet:
        print_summary(result, args.input, args.output)
    return 0


def _cmd_show(args):
    from .cli_formatting import print_header, print_summary, print_values
    from .pipeline import analyze_file

    result = analyze_file(args.input, k=args.k)
    print_header(f"packstat: {args.input}")
    print_summary(result, args.input)
    print_values(result)
    return 0


def _cmd_pack(args):
    from .cli_formatting import console
    from .codec.packer import pack_values
    from .errors import InputReadError, OutputWriteError

    values = list(args.values)
    if args.from_text is not None:
        try:
            with open(args.from_text) as f:
                text = f.read()
        except OSError as e:
            raise InputReadError(args.from_text, e) from e
        values.extend(int(tok) for tok in text.split())

    packed = pack_values(values)
    try:
        with open(args.output, "wb") as f:
            f.write(packed)
    except OSError as e:
        raise OutputWriteError(args.output, e) from e
    console.print(f"Packed [bold]{len(values)}[/bold] values into {len(packed):,} bytes -> {args.output}")
    return 0


def _cmd_compare(args):
    from .cli_formatting import print_comparison
    from .errors import InputReadError
    from .report import parse_report

    sections = []
    for path in (args.expected, args.actual):
        try:
            with open(path) as f:
                sections.append(parse_report(f.read()))
        except OSError as e:
            raise InputReadError(path, e) from e
    (exp_top, exp_last), (act_top, act_last) = sections

    top_ok = print_comparison(exp_top, act_top, "Sorted max values")
    last_ok = print_comparison(exp_last, act_last, "Last values")
    return 0 if top_ok and last_ok else 1


if __name__ == "__main__":
    main()
