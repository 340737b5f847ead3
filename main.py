from rich.pretty import pprint

from sigilopt import *

force = new_flag("f", "force", "overwrite existing files")
output = new_single_arg("o", "output", "file to write")
include = new_multi_arg("I", "include", "directory to search, may repeat")
verbose = new_counter("v", "verbose", "more output per occurrence")


if __name__ == '__main__':
    leftovers = getopts(shell=True)
    pprint(dict(force=force.passed, output=output.value, include=include.values, verbose=verbose.count, rest=leftovers))
