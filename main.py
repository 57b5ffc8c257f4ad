"""Run the bootstrap launcher from a source checkout: ``python main.py [args...]``.

Argument 0 is this file, so Java is asked to run main.py as the jar; this
is only useful for trying the launcher against a stub java.
"""
import runpy

if __name__ == "__main__":
    runpy.run_module("canteen.cli", run_name="__main__")
