"""Stateless helpers: psychrometrics, time arithmetic, event bus."""
