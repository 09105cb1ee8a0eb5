"""
scopelang Interpreter

This is the main entry point for the scopelang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer splits the source into whitespace-delimited tokens.
3. The Interpreter consumes the tokens statement by statement inside a
   global scope, printing one line per `print` statement.
4. If the script is malformed, the error message is printed and the run stops.
"""
import os
import sys

from scopelang.lexer import tokenize
from scopelang.interpreter import Interpreter, GLOBAL_DEPTH


USAGE = """\
scopelang Interpreter

Usage:
    scl                 start the interactive REPL
    scl <script.scl>    run a script file
    scl -h | --help     show this message

Language:
    Tokens are separated by any whitespace; a statement may span lines
    and several statements may share a line.

    NAME = 42       bind an integer (optional leading '-', 32-bit range)
    NAME = OTHER    copy the current value of OTHER (no-op if OTHER is unset)
    print NAME      print the value of NAME, or 'null' if it is unset
    scope {         open a nested scope; assignments inside shadow outer names
    }               close the innermost scope

Environment:
    SCLDEBUG        when set, print the token stream before running a script
"""


def print_usage():
    """
    Print usage.
    """
    print()
    print(USAGE)


def debug_print_tokens(tokens):
    """
    Print tokenized source
    """
    print("\nTokens:\n")
    print(tokens)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a scopelang script

    Returns:
        int: 0 on success, 1 if the script could not be read or executed.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()

        tokens = tokenize(code)

        if os.environ.get('SCLDEBUG'):
            debug_print_tokens(tokens)

        interpreter = Interpreter(script_name)
        interpreter.execute(tokens)
    except Exception as e:  # pylint: disable=broad-exception-caught
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL

    The global scope stays open for the whole session, so variables and
    nested scopes carry over from one line to the next. A statement left
    incomplete at the end of a line is held until later lines finish it.
    """
    print("scopelang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    interpreter.memory.open_scope()
    pending = []
    line_num = 0
    while True:
        try:
            nested = interpreter.memory.depth > GLOBAL_DEPTH
            prompt = "... " if pending or nested else ">>> "
            line = input(prompt)
            line_num += 1
            if line.strip() in {"exit", "quit"}:
                break
            try:
                pending = interpreter.run(
                    pending + tokenize(line, first_line=line_num), partial=True
                )
            except Exception as e:  # pylint: disable=broad-exception-caught
                print(f"{type(e).__name__}: {e}")
                pending = []
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """Console script entry point."""
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
