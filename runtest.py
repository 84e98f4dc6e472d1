#!.venv/bin/python

# The shebang may point towards a venv, but CI executes python -m runtest

import os
import sys
import traceback
import unittest

from test.runtime import ResultAdapter, StyledStream


if __name__ == "__main__":
    stream = sys.stdout
    styled = StyledStream(stream)

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    println(styled.h1("1. Setup"))
    println(styled.h2("Python"))
    println(f"{sys.executable}")
    println(styled.h2("Python Path"))
    for path in sys.path:
        println(f"{path}")
    println(styled.h2("Current Directory"))
    println(f"{os.getcwd()}")

    println(styled.h1("2. Unit Testing"))
    try:
        suite = unittest.defaultTestLoader.discover("test", top_level_dir=".")
        result = unittest.TextTestRunner(
            stream=stream, resultclass=ResultAdapter
        ).run(suite)
        sys.exit(not result.wasSuccessful())
    except Exception as x:
        trace = traceback.format_exception(x)
        println("".join(trace[:-1]))
        println(styled.err(trace[-1]))
        sys.exit(1)
