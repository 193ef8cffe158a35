import sys
from typing import Callable, Iterable, Optional, TextIO

from calclang.errors import CalcError, format_error
from calclang.parser import parse
from calclang.runtime import evaluate_statement
from calclang.tokenizer import tokenize
from calclang.value import Value

INTERACTIVE_SOURCE_NAME = "(input)"


class Session:
    """Interpreter state for the lifetime of the process: the variable table and a line counter.

    Every line is tokenized and parsed as a whole, then its statements are evaluated one by one and
    their values printed. A CalcError abandons the rest of the line; values printed and variables
    bound by earlier statements of the line stay.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        color: bool = False,
        trace: bool = False,
        source_name: str = INTERACTIVE_SOURCE_NAME,
    ):
        self.variables: dict[str, Value] = dict()
        self.out = out if out is not None else sys.stdout
        self.color = color
        self.trace = trace
        self.source_name = source_name
        self.line_num = 0

    def execute(self, line: str) -> bool:
        """Runs one line of input, returns False if it was abandoned because of an error"""
        self.line_num += 1
        try:
            self._execute(line)
        except CalcError as e:
            self.report(e)
            return False
        except RecursionError:
            self.report(CalcError("expression is too deeply nested", pos=1))
            return False
        return True

    def _execute(self, line: str) -> None:
        tokens = tokenize(line)
        if self.trace:
            print(f"tokens: {' '.join(str(t) for t in tokens)}", file=sys.stderr)

        statements = parse(tokens)
        if self.trace:
            statements_str = "\n".join(f" {i + 1:> 2}: {stmt}" for i, stmt in enumerate(statements))
            print(f"ast:\n{statements_str}", file=sys.stderr)

        for statement in statements:
            print(evaluate_statement(statement, self.variables), file=self.out)

    def report(self, error: CalcError) -> None:
        print(format_error(error, self.source_name, self.line_num, color=self.color), file=self.out)

    def skip_line(self, error: CalcError) -> None:
        """Counts a line that could not be read and reports why"""
        self.line_num += 1
        self.report(error)

    def run_file(self, lines: Iterable[str]) -> int:
        """Executes lines one after another, returns the number of lines that failed"""
        failed = 0
        for line in lines:
            if not self.execute(line.rstrip("\r\n")):
                failed += 1
        return failed


def run_repl(session: Session, read_line: Callable[[str], str] = input, prompt: str = "> ") -> None:
    while True:
        try:
            code = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=session.out)
            return
        except UnicodeDecodeError as e:
            session.skip_line(CalcError("input is not valid UTF-8", pos=e.start))
            continue
        session.execute(code)
