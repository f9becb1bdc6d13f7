"""Kerr metric in Boyer-Lindquist coordinates and the photon geodesic equations."""

from __future__ import annotations

import math
from typing import Sequence


class BoyerLindquistMetric:
    """3+1 split of the Kerr metric with its radial and polar derivatives.

    Calling :meth:`compute` fills in the lapse ``alpha``, shift ``beta3``,
    inverse spatial metric ``gamma11..gamma33``, covariant components
    ``g_00, g_03, g_11, g_22, g_33`` and their derivatives at a point.
    """

    def __init__(self, spin: float, mass: float) -> None:
        self.spin = spin
        self.mass = mass
        nan = math.nan
        self.alpha = self.beta3 = nan
        self.gamma11 = self.gamma22 = self.gamma33 = nan
        self.g_00 = self.g_03 = self.g_11 = self.g_22 = self.g_33 = nan
        self.d_alpha_dr = self.d_beta3_dr = nan
        self.d_gamma11_dr = self.d_gamma22_dr = self.d_gamma33_dr = nan
        self.d_alpha_dth = self.d_beta3_dth = nan
        self.d_gamma11_dth = self.d_gamma22_dth = self.d_gamma33_dth = nan

    def compute(self, r: float, theta: float) -> "BoyerLindquistMetric":
        """Evaluate the metric and its derivatives at (r, theta)."""
        a = self.spin
        m = self.mass
        r2 = r * r
        a2 = a * a
        sin_t = math.sin(theta)
        cos_t = math.cos(theta)
        sin2 = sin_t * sin_t
        cos2 = cos_t * cos_t
        p2 = r2 + a2 * cos2
        delta = r2 + a2 - 2.0 * m * r
        sigma = (r2 + a2) * (r2 + a2) - a2 * delta * sin2

        # Components
        self.alpha = math.sqrt(p2 * delta / sigma)
        self.beta3 = -2.0 * m * a * r / sigma
        self.gamma11 = delta / p2
        self.gamma22 = 1.0 / p2
        self.gamma33 = p2 / (sigma * sin2)
        self.g_00 = 2.0 * m * r / p2 - 1.0
        self.g_03 = (-2.0 * m * a * r / p2) * sin2
        self.g_11 = p2 / delta
        self.g_22 = p2
        self.g_33 = (sigma / p2) * sin2

        # Radial derivatives
        dp2_dr = 2.0 * r
        dp2inv_dr = -2.0 * r / p2 / p2
        ddelta_dr = dp2_dr - 2.0 * m
        dsigmainv_dr = (4.0 * r * (r2 + a2) - ddelta_dr * a2 * sin2) / -sigma / sigma

        self.d_gamma11_dr = delta * dp2inv_dr + ddelta_dr / p2
        self.d_gamma22_dr = dp2inv_dr
        self.d_gamma33_dr = dp2_dr / (sigma * sin2) + dsigmainv_dr * p2 / sin2
        self.d_alpha_dr = (0.5 / self.alpha) * (
            dp2_dr * delta / sigma + ddelta_dr * p2 / sigma + dsigmainv_dr * p2 * delta
        )
        self.d_beta3_dr = -2.0 * m * a * (1.0 / sigma + r * dsigmainv_dr)

        # Polar derivatives
        dp2_dth = -2.0 * a2 * sin_t * cos_t
        dp2inv_dth = -dp2_dth / p2 / p2
        dsigmainv_dth = 2.0 * a2 * delta * sin_t * cos_t / sigma / sigma

        self.d_gamma11_dth = delta * dp2inv_dth
        self.d_gamma22_dth = dp2inv_dth
        self.d_gamma33_dth = (
            dp2_dth / sigma / sin2
            + dsigmainv_dth * p2 / sin2
            - 2.0 * cos_t / sin_t / sin2 * p2 / sigma
        )
        self.d_alpha_dth = 0.5 / self.alpha * delta * (dp2_dth / sigma + dsigmainv_dth * p2)
        self.d_beta3_dth = -2.0 * m * a * r * dsigmainv_dth
        return self

    def derivatives(self, y: Sequence[float]) -> tuple[float, ...]:
        """Right-hand side of the photon geodesic equations.

        ``y`` is (r, theta, phi, u_r, u_theta, u_phi); the result is its
        derivative with respect to coordinate time.
        """
        r, theta, _phi, u_r, u_th, u_phi = y
        self.compute(r, theta)

        u_upper_t = (
            math.sqrt(
                self.gamma11 * u_r * u_r
                + self.gamma22 * u_th * u_th
                + self.gamma33 * u_phi * u_phi
            )
            / self.alpha
        )

        dr = self.gamma11 * u_r / u_upper_t
        dth = self.gamma22 * u_th / u_upper_t
        dphi = self.gamma33 * u_phi / u_upper_t - self.beta3

        radial = (
            u_r * u_r * self.d_gamma11_dr
            + u_th * u_th * self.d_gamma22_dr
            + u_phi * u_phi * self.d_gamma33_dr
        )
        du_r = (
            -self.alpha * u_upper_t * self.d_alpha_dr
            + u_phi * self.d_beta3_dr
            - radial / (2.0 * u_upper_t)
        )

        polar = (
            u_r * u_r * self.d_gamma11_dth
            + u_th * u_th * self.d_gamma22_dth
            + u_phi * u_phi * self.d_gamma33_dth
        )
        du_th = (
            -self.alpha * u_upper_t * self.d_alpha_dth
            + u_phi * self.d_beta3_dth
            - polar / (2.0 * u_upper_t)
        )

        return (dr, dth, dphi, du_r, du_th, 0.0)