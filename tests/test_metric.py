import math

import pytest

from cosmic.metric import BoyerLindquistMetric

# Parameters used by the reference black hole image program.
A = 0.99
M = 1.0
D = 500.0
THETA0 = 85.0 * math.pi / 180.0


def _initial_ray(metric, x_sc, y_sc):
    beta = x_sc / D
    alpha = y_sc / D
    r = math.sqrt(D * D + x_sc * x_sc + y_sc * y_sc)
    theta = THETA0 - alpha
    metric.compute(r, theta)
    return [
        r,
        theta,
        beta,
        -math.sqrt(metric.g_11) * math.cos(beta) * math.cos(alpha),
        -math.sqrt(metric.g_22) * math.sin(alpha),
        math.sqrt(metric.g_33) * math.sin(beta) * math.cos(alpha),
    ]


def _central(f, x, h=1e-6):
    return (f(x + h) - f(x - h)) / (2.0 * h)


def test_schwarzschild_equatorial_values():
    m = BoyerLindquistMetric(0.0, 1.0).compute(10.0, math.pi / 2.0)
    assert m.g_00 == pytest.approx(-0.8)
    assert m.alpha == pytest.approx(math.sqrt(0.8))
    assert m.beta3 == 0.0
    assert m.g_03 == 0.0
    assert m.g_22 == pytest.approx(100.0)


def test_adm_decomposition_identities():
    m = BoyerLindquistMetric(A, M).compute(7.5, 1.2)
    assert m.g_03 == pytest.approx(m.beta3 * m.g_33)
    assert m.g_00 == pytest.approx(-m.alpha ** 2 + m.beta3 ** 2 * m.g_33)
    assert m.gamma11 * m.g_11 == pytest.approx(1.0)
    assert m.gamma22 * m.g_22 == pytest.approx(1.0)
    assert m.gamma33 * m.g_33 == pytest.approx(1.0)


@pytest.mark.parametrize("name,component", [
    ("d_alpha_dr", "alpha"),
    ("d_beta3_dr", "beta3"),
    ("d_gamma11_dr", "gamma11"),
    ("d_gamma22_dr", "gamma22"),
    ("d_gamma33_dr", "gamma33"),
])
def test_radial_derivatives_match_finite_differences(name, component):
    r, theta = 6.3, 1.1
    metric = BoyerLindquistMetric(A, M)

    def value(rr):
        return getattr(BoyerLindquistMetric(A, M).compute(rr, theta), component)

    metric.compute(r, theta)
    assert getattr(metric, name) == pytest.approx(_central(value, r), rel=1e-5, abs=1e-10)


@pytest.mark.parametrize("name,component", [
    ("d_alpha_dth", "alpha"),
    ("d_beta3_dth", "beta3"),
    ("d_gamma11_dth", "gamma11"),
    ("d_gamma22_dth", "gamma22"),
    ("d_gamma33_dth", "gamma33"),
])
def test_polar_derivatives_match_finite_differences(name, component):
    r, theta = 6.3, 1.1
    metric = BoyerLindquistMetric(A, M)

    def value(th):
        return getattr(BoyerLindquistMetric(A, M).compute(r, th), component)

    metric.compute(r, theta)
    assert getattr(metric, name) == pytest.approx(_central(value, theta), rel=1e-5, abs=1e-10)


@pytest.mark.parametrize("x_sc,y_sc", [(-23.85, -13.5), (0.15, 0.0), (10.0, 5.0)])
def test_initial_ray_is_null(x_sc, y_sc):
    metric = BoyerLindquistMetric(A, M)
    y = _initial_ray(metric, x_sc, y_sc)
    norm = (
        metric.gamma11 * y[3] ** 2
        + metric.gamma22 * y[4] ** 2
        + metric.gamma33 * y[5] ** 2
    )
    assert norm == pytest.approx(1.0)


@pytest.mark.parametrize("x_sc,y_sc", [(-23.85, -13.5), (0.15, 0.0), (10.0, 5.0)])
def test_photon_moves_at_light_speed(x_sc, y_sc):
    metric = BoyerLindquistMetric(A, M)
    y = _initial_ray(metric, x_sc, y_sc)
    k = metric.derivatives(y)
    speed2 = (
        metric.g_11 * k[0] ** 2
        + metric.g_22 * k[1] ** 2
        + metric.g_33 * (k[2] + metric.beta3) ** 2
    )
    assert speed2 == pytest.approx(metric.alpha ** 2)


def test_derivatives_conserve_u_phi_and_move_inward():
    metric = BoyerLindquistMetric(A, M)
    y = _initial_ray(metric, 0.15, 0.0)
    k = metric.derivatives(y)
    assert len(k) == 6
    assert k[5] == 0.0
    assert k[0] < 0.0


def test_derivatives_update_metric_state():
    metric = BoyerLindquistMetric(A, M)
    y = [12.0, 1.3, 0.0, -1.0, 0.1, 2.0]
    metric.derivatives(y)
    reference = BoyerLindquistMetric(A, M).compute(12.0, 1.3)
    assert metric.alpha == pytest.approx(reference.alpha)
    assert metric.g_33 == pytest.approx(reference.g_33)


def test_inside_horizon_has_no_lapse():
    with pytest.raises(ValueError):
        BoyerLindquistMetric(A, M).compute(1.0, 1.0)