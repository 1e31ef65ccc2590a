"""
Atomic utility components.

Each component is a functional core (_impl) with a thin shell of run_*
entry points, input/output models and ports.
"""
