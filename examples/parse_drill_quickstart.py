"""
Drill parser quickstart.
- Parses the KiCad sample program from the test fixtures
- Streams commands through a callback as they are emitted
- Prints the program summary

Run from the repository root:
    python examples/parse_drill_quickstart.py [FILE]
"""

import sys
from pathlib import Path

from ncdrill import DrillInterpreter, summarize
from ncdrill.protocol import wire

DEFAULT_FILE = Path(__file__).resolve().parent.parent / "tests" / "fixtures" / "kicad.drl"


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_FILE
    interpreter = DrillInterpreter(on_command=lambda c: print(f"{c.line:4d}  {wire.encode_command(c)}"))
    program = interpreter.load_file(path)

    stats = summarize(program)
    print(f"hits: {stats['hits']}  slots: {stats['slots']}  routes: {stats['routes']}")
    print("bounds:", stats["bounds"])
    for message in interpreter.warnings + stats["warnings"]:
        print("warning:", message)
    raise SystemExit(0)


if __name__ == "__main__":
    main()
