"""
Basic Panel Example
===================

This example generates the tutorial panel: 200 simulated individuals, each
measured 4 to 10 times, with individual growth curves on a log time scale.
"""

import longsim

print("=" * 60)
print("BASIC LONGITUDINAL PANEL EXAMPLE")
print("=" * 60)

# 1. Create a model with the tutorial defaults
model = longsim.LongitudinalModel()

# 2. Population curve: outcome = 1 + 6 * ln(time)
model.set_fixed_effects(intercept=1.0, slope=6.0)

# 3. Individuals differ in level (SD 2.5) and growth (SD 2.0),
#    and those who start higher grow a little faster (correlation 0.3)
model.set_random_effects(intercept_sd=2.5, slope_sd=2.0, correlation=0.3)

# 4. Measurement error with SD 1.5, correlated 0.4 between consecutive visits
model.set_error_sd(1.5).set_autocorrelation(0.4)
model.set_seed(42)

print(f"\n{model}")

# 5. Generate and inspect
data = model.generate(200, progress_callback=True)
frame = data.to_frame()

print(f"\nObservations: {len(frame)} from {data.n_individuals} individuals")
print(frame.head(12).to_string(index=False))

print("\nObservations per individual:")
print(frame.groupby("individual_id").size().value_counts().sort_index().to_string())

print("\nIndividuals per group:")
print(frame.drop_duplicates("individual_id")["group"].value_counts().sort_index().to_string())

# 6. Hand the data to the plotting layer
model.plot(data)
