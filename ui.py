import argparse
import logging
import sys
import platform


def str2bool(v):
    """For making the ``ArgumentParser`` understand boolean values"""
    return v.lower() in ("yes", "true", "t", "1")


def run_diagnostics():
    """Check availability of external libraries."""
    OKGREEN = '\033[92m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    if sys.version_info > (3, 0):
        print("Checking Python3.... %sOK (%s)%s"
              % (OKGREEN, platform.python_version(), ENDC))
    else:
        print("Checking Python3.... %sNOT FOUND %s%s"
              % (FAIL, sys.version_info, ENDC))
        print("Please upgrade to Python 3!")
    try:
        import numpy
        print("Checking numpy.... %sOK (%s)%s"
              % (OKGREEN, numpy.__version__, ENDC))
    except ImportError:
        print("Checking numpy.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("numpy is not available. Random checks cannot draw values.")
    try:
        import sortedcontainers
        print("Checking sortedcontainers.... %sOK (%s)%s"
              % (OKGREEN, sortedcontainers.__version__, ENDC))
    except ImportError:
        print("Checking sortedcontainers.... %sNOT FOUND%s" % (FAIL, ENDC))
        print("sortedcontainers is not available. Random checks have no "
              "reference to compare against.")


def get_parser():
    """Get the parser object which is used to build the configuration
    argument ``args``. This is a helper method for ``get_args()``

    Returns:
        ArgumentParser. The pre-filled parser object
    """
    parser = argparse.ArgumentParser(
        description="Randomized stress test of the min-max heap.")
    parser.register('type', 'bool', str2bool)

    ## General options
    group = parser.add_argument_group('General options')
    group.add_argument("--run_diagnostics", default=False, action="store_true",
                       help="Run diagnostics and check availability of "
                       "external libraries.")
    group.add_argument("--verbosity", default="info",
                        choices=['debug', 'info', 'warn', 'error'],
                        help="Log level: debug,info,warn,error")
    group.add_argument("--seed", default=0, type=int,
                        help="Seed of the random generator. Each trial uses "
                        "its own generator seeded with seed + trial index.")
    group.add_argument("--range", default=10, type=int,
                        help="Number of random trials to run.")
    group.add_argument("--ignore_sanity_checks", default=False, type='bool',
                       help="Ignore sanity checks in validate_args.")

    ## Heap options
    group = parser.add_argument_group('Heap options')
    group.add_argument("--size", default=100, type=int,
                        help="Number of random insertions at the start of "
                        "each trial.")
    group.add_argument("--max_value", default=0, type=int,
                        help="Largest value drawn. If 0, use 5 * size so "
                        "that duplicates are present but rare.")
    group.add_argument("--capacity", default=0, type=int,
                        help="Capacity of a bounded heap. If positive, "
                        "trials check BoundedMinMaxHeap instead of the "
                        "unbounded MinMaxHeap.")
    return parser


def parse_args(parser):
    return parser.parse_args()


def get_args():
    parser = get_parser()
    args = parse_args(parser)
    return args


def validate_args(args):
    """Some rudimentary sanity checks for configuration options.
    This method directly prints help messages to the user. In case of fatal
    errors, it raises an AttributeError exception.

    Args:
        args (object):  Configuration as returned by ``get_args``
    """
    sanity_check_failed = False
    if args.size < 0:
        logging.warning("Negative size (%d) given." % args.size)
        sanity_check_failed = True
    if args.range <= 0:
        logging.warning("Number of trials (%d) must be positive." % args.range)
        sanity_check_failed = True
    if args.max_value < 0:
        logging.warning("Negative max_value (%d) given." % args.max_value)
        sanity_check_failed = True
    if args.capacity > args.size:
        logging.warning("Capacity %d exceeds size %d. No elements will be "
                        "pruned!" % (args.capacity, args.size))

    if sanity_check_failed and not args.ignore_sanity_checks:
        raise AttributeError("Sanity check failed (see warnings). If you want "
            "to proceed despite these warnings, use --ignore_sanity_checks.")
