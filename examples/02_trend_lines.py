"""
Trend Lines Example
===================

Fits one trend line per individual and one pooled line, the two layers a
"spaghetti plot with trend" chart draws on top of the raw trajectories.
"""

import longsim
from longsim.stats.trends import fit_individual_trends, population_trend

model = longsim.LongitudinalModel()
model.set_seed(42)
data = model.generate(200)

trends = fit_individual_trends(data)
pooled = population_trend(data)

print("=" * 60)
print("TREND LINES")
print("=" * 60)
print(trends.head(10).to_string(index=False))

print(f"\nPooled trend: outcome = {pooled['intercept']:.2f} + {pooled['slope']:.2f} * ln(time)")
print(f"Generating values:  outcome = {model.beta0:.2f} + {model.beta1:.2f} * ln(time)")

print("\nMean individual slope by group:")
print(trends.groupby("group")["slope"].agg(["mean", "std", "count"]).round(2).to_string())

print(f"\nCorrelation of fitted intercepts and slopes: {trends['intercept'].corr(trends['slope']):.2f}")
print(f"(generating correlation of random effects: {model.tau01})")
