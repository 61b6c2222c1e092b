"""
Item Response Surfaces Example
==============================

Computes item characteristic curves, item information and a probability
surface over ability x difficulty, ready for line charts and heat maps.
"""

import numpy as np

from longsim.stats.irt import (
    expected_score_curve,
    item_information,
    item_response_probability,
    surface_frame,
)

theta = np.linspace(-4, 4, 81)

print("=" * 60)
print("ITEM RESPONSE CURVES")
print("=" * 60)

for label, params in {
    "Rasch (b=0)": dict(difficulty=0.0),
    "2PL (a=2, b=1)": dict(difficulty=1.0, discrimination=2.0),
    "3PL (a=1.5, b=0, c=0.2)": dict(difficulty=0.0, discrimination=1.5, guessing=0.2),
}.items():
    p = item_response_probability(theta, **params)
    info = item_information(theta, **params)
    print(f"{label:<26} P(theta=0) = {p[40]:.3f}   max information = {info.max():.3f} at theta = {theta[np.argmax(info)]:.1f}")

surface = surface_frame(theta, np.linspace(-3, 3, 61), discrimination=1.2)
print(f"\nSurface rows for heat map: {len(surface)}")
print(surface.sample(5, random_state=1).round(3).to_string(index=False))

tcc = expected_score_curve(theta, difficulties=[-1.5, -0.5, 0.0, 0.5, 1.5], discriminations=[0.8, 1.0, 1.2, 1.0, 0.8])
print(f"\nExpected score on a 5-item test at theta = -2, 0, 2: {tcc[20]:.2f}, {tcc[40]:.2f}, {tcc[60]:.2f}")
