#!/usr/bin/env python3
"""
Sparse Life Scenario Runner

Prints each demonstration scenario generation by generation, e.g.

    python scripts/run_scenarios.py --scenario 6
"""

import sys

from sparse_life.scenarios import main

if __name__ == "__main__":
    sys.exit(main())
