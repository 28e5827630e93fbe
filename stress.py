import logging
import sys
import time
import traceback

import numpy as np

from minmaxheap.check import random_trial
from ui import get_args, run_diagnostics, validate_args

args = None


def base_init(new_args):
    global args
    args = new_args
    # Set up logger
    logging.basicConfig(format='%(asctime)s %(levelname)s: %(message)s')
    logging.getLogger().setLevel(logging.INFO)
    if args.verbosity == 'debug':
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbosity == 'info':
        logging.getLogger().setLevel(logging.INFO)
    elif args.verbosity == 'warn':
        logging.getLogger().setLevel(logging.WARN)
    elif args.verbosity == 'error':
        logging.getLogger().setLevel(logging.ERROR)


def do_trials(num_trials, size, seed=0, max_value=None, capacity=0):
    """Runs ``num_trials`` independent random trials and returns the total
    operation counts. Stops at the first failing trial.
    """
    totals = {}
    start_time = time.time()
    logging.info("Start time: %s" % start_time)
    for trial_idx in range(num_trials):
        start_trial_time = time.time()
        rng = np.random.default_rng(seed=seed + trial_idx)
        try:
            counts = random_trial(size, rng=rng, max_value=max_value,
                                  capacity=capacity)
        except AssertionError as e:
            logging.fatal("Trial %d (seed %d) failed: %s Stack trace: %s"
                          % (trial_idx + 1, seed + trial_idx, e,
                             traceback.format_exc()))
            sys.exit("Min-max heap check failed.")
        for op, n in counts.items():
            totals[op] = totals.get(op, 0) + n
        logging.info("Stats (ID: %d): num_ops=%d time=%.2f"
                     % (trial_idx + 1,
                        sum(counts.values()),
                        time.time() - start_trial_time))
    logging.info("All %d trials passed in %.2fs: %s"
                 % (num_trials, time.time() - start_time, totals))
    return totals


if __name__ == "__main__":
    args = get_args()
    base_init(args)
    if args.run_diagnostics:
        run_diagnostics()
        sys.exit()
    validate_args(args)
    do_trials(args.range,
              args.size,
              seed=args.seed,
              max_value=args.max_value or None,
              capacity=args.capacity)
