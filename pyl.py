"""
pylite Interpreter

This is the main entry point for the pylite interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Interpreter scans the source, folding expressions and dispatching
   builtin calls as it goes.
3. Every token that carries a value is printed with its position.

Run with no arguments to enter the REPL, where each line is evaluated on its
own and errors do not end the session.
"""
import os
import sys

from pylite.exceptions import ScriptError
from pylite.interpreter import Interpreter
from pylite.lexer import tokenize


def print_usage():
    """
    Print usage.
    """
    print()
    print("pylite Interpreter")
    print()
    print("Usage:")
    print("    pyl <script.py>")
    print()
    print("Arguments:")
    print("    <script.py>")
    print("        Path to a source file to evaluate. Every value the file")
    print("        produces is printed as '<file>:<row>:<column> <value>'.")
    print()
    print("Example:")
    print("    pyl hello.py")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    PYLITEDEBUG")
    print("        When set, print the scanned lexemes before evaluating.")


def debug_print_tokens(tokens):
    """
    Print scanned lexemes
    """
    print("\nLexemes:\n")
    for token in tokens:
        print(repr(token))
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a script and return the process exit code.
    """
    if not os.path.exists(script_name):
        print(f"File not found: '{script_name}'")
        return 1

    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    if code == "":
        print(f"File is empty: '{script_name}'")
        return 1

    filename = os.path.basename(script_name)
    try:
        if os.environ.get('PYLITEDEBUG'):
            debug_print_tokens(tokenize(code, filename))

        interpreter = Interpreter(filename).load(code)
        for token in interpreter.tokens():
            print(token)
    except ScriptError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("pylite Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            try:
                for token in interpreter.run(line):
                    print(token.value)
            except ScriptError as e:
                print(f"{type(e).__name__}: {e}")
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


def cli() -> int:
    """
    Console script entry point.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
