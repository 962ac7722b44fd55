"""
Adapter implementations for the Route Calculator.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of flight sources and algorithms.
"""
