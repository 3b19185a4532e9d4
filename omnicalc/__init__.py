"""omnicalc — Scientific, age and algebra calculators.

The scientific calculator takes keystrokes from buttons or a keyboard, keeps
one expression buffer, and evaluates it through SymPy with a bounded history.
The age calculator and algebra helper are small pure-function tools beside it.

Usage:
    python -m omnicalc scientific                    # Interactive calculator
    python -m omnicalc eval "sin(pi/2)+2^3"          # One-shot evaluation
    python -m omnicalc age 2000-01-15                # Age as of today
    python -m omnicalc quadratic -- 1 -3 2           # Roots of x^2 - 3x + 2
"""

__version__ = "0.1.0"
