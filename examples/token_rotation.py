#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2025 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~

"""
Rotate over a bounded set of active API tokens. Spare tokens wait in a
buffer and take over the slot of any token that gets revoked.

    $ python examples/token_rotation.py --active 3 --spare 4 --requests 20
"""

import argparse
import logging
import random

from robin import FIFOBuffer
from robin import LIFOBuffer
from robin import Robin


logger = logging.getLogger(__name__)


# ========================================================================= #
# token rotation                                                            #
# ========================================================================= #


def make_token_robin(active: int, spare: int, policy: str = "lifo") -> Robin:
    buffer_cls = {"lifo": LIFOBuffer, "fifo": FIFOBuffer}[policy]
    return Robin.bounded(active, buffer=buffer_cls(spare))


def simulate(r: Robin, num_requests: int, fail_prob: float, seed: int = 42):
    rng = random.Random(seed)
    counts = {}
    for i in range(num_requests):
        token, ok = r.next()
        if not ok:
            logger.warning(f"[EXHAUSTED] no tokens left after {i} requests")
            break
        counts[token] = counts.get(token, 0) + 1
        if rng.random() < fail_prob:
            r.remove(token)
            logger.info(f"[REVOKED] {token}, active: {len(r)}, spare: {r.buffer_len()}")
        else:
            logger.debug(f"[OK] request {i} used {token}")
    return counts


# ========================================================================= #
# entrypoint                                                                #
# ========================================================================= #


if __name__ == "__main__":
    # initialise logging
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser()
    parser.add_argument("--active", type=int, default=3)
    parser.add_argument("--spare", type=int, default=4)
    parser.add_argument("--requests", type=int, default=20)
    parser.add_argument("--fail-prob", type=float, default=0.15)
    parser.add_argument("--policy", choices=["lifo", "fifo"], default="lifo")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    robin = make_token_robin(args.active, args.spare, policy=args.policy)
    robin.add(*(f"token-{i:02d}" for i in range(args.active + args.spare)))
    logger.info(f"starting with {robin!r}")

    usage = simulate(robin, args.requests, args.fail_prob, seed=args.seed)
    for token, count in sorted(usage.items()):
        print(f"{token}: {count}")
