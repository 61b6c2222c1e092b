"""
Autocorrelation Example
=======================

Shows that the residual SD stays fixed while the autocorrelation changes:
only the smoothness of each individual's residual path differs.
"""

import numpy as np

import longsim

print("=" * 60)
print("RESIDUAL AUTOCORRELATION")
print("=" * 60)
print(f"{'rho':>6} {'residual SD':>12} {'lag-1 corr':>11}")

for rho in [-0.6, 0.0, 0.4, 0.8, 0.95]:
    data = longsim.generate(
        n=2000,
        max_obs=10,
        beta0=1.0,
        beta1=6.0,
        autocorrelation=rho,
        sigma=1.5,
        tau0=2.5,
        tau1=2.0,
        tau01=0.3,
        seed=2137,
    )
    same = data.individual_id[1:] == data.individual_id[:-1]
    lag1 = np.corrcoef(data.residuals[:-1][same], data.residuals[1:][same])[0, 1]
    print(f"{rho:>6.2f} {np.std(data.residuals):>12.3f} {lag1:>11.3f}")

print("\nThe SD column stays near sigma = 1.5 for every rho.")
