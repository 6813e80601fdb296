# simulations/__init__.py
"""
Monte Carlo pi experiments built on the pi_estimation sampler.

Run comparisons via:
    python -m simulations.compare --samples ... [--trials ...] [--method-a ...] [--method-b ...] [--show]
"""
