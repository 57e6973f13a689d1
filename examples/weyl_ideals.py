"""Example script: left, right and two-sided ideals of the second Weyl algebra.

Run with
    python examples/weyl_ideals.py
"""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from pbwalg import (intersect, left_ideal, opposite_algebra, right_ideal,
                    two_sided_ideal, weyl_algebra)
from pbwalg.utils.log_config import logger


def main() -> None:
    R, (x, y, dx, dy) = weyl_algebra("QQ", ["x", "y"])
    logger.info("dx*x = %s", dx*x)

    I = left_ideal([x**2, y**2])
    logger.info("%s has basis %s", I, [str(g) for g in I.groebner_basis()])
    logger.info("x^2 - y^2 in I: %s", x**2 - y**2 in I)
    logger.info("I + <dy^2> is the unit ideal: %s", (I + left_ideal([dy**2])).is_one())

    # one-sided membership depends on the side
    logger.info("y*dy in left <dy>: %s, in right <dy>: %s", y*dy in left_ideal([dy]), y*dy in right_ideal([dy]))
    logger.info("two-sided <dy> is the unit ideal: %s", two_sided_ideal([dy]).is_one())

    K = intersect(left_ideal([dx]), left_ideal([dy]), left_ideal([x]))
    logger.info("Intersection basis: %s", [str(g) for g in K.groebner_basis()])

    opR, M = opposite_algebra(R)
    logger.info("M(dy*dx*x*y) = %s in %s", M(dy*dx*x*y), opR)


if __name__ == "__main__":
    main()
