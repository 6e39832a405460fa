# simulations/__init__.py
"""
Monte Carlo simulations and command-line tools for reservoir-lottery.

Compare sampling methods via:
    python -m simulations.compare --method-a ... --method-b ... --capacity ... --stream ... --trials ...

Run a single lottery via:
    python -m simulations.draw --position first:1 --position second:3 alice bob carol ...
"""
