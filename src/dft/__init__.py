"""
Complex-number foundation for DFT/IFFT.

Immutable complex values, polar conversion, roots of unity (twiddle factors)
and JSON contracts for exported values. Independent of any transform engine.
"""
