import math

import pytest

from jetopt.jet_calc import JetCalcProblem

SAMPLE_DESIGN = [
    5000.0,  # shaft speed
    150.0,  # compressor inlet velocity
    1100.0,  # combustor exit temperature
    0.03,  # compressor inlet hub radius
    0.08,  # compressor inlet tip radius
    0.005,  # compressor outlet area
    0.1,  # compressor outlet meanline radius
    150.0,  # compressor temperature rise
    0.03,  # turbine inlet hub radius
    0.08,  # turbine inlet tip radius
    0.005,  # turbine outlet area
    0.1,  # turbine outlet meanline radius
]


@pytest.fixture
def problem():
    return JetCalcProblem()


def test_no_constraints(problem):
    assert problem.get_nec() == 0
    assert problem.get_nic() == 0


def test_bounds_are_empty(problem):
    assert problem.get_bounds() == ([], [])


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1.0, 2.0, 3.0], False),
        ([], False),
        ([1.0, math.nan], True),
        ([math.inf], True),
        ([-math.inf, 0.0], True),
    ],
)
def test_invalid_ret(problem, values, expected):
    assert problem.invalid_ret(values) is expected


def test_zero_mass_flow_gives_zero_velocity(problem):
    assert problem.compute_u_a(0.0, 0.4, 1100, 200, 1.36, 0.01) == 0.0


def test_sample_duct_has_finite_positive_velocity(problem):
    u_a = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    assert math.isfinite(u_a)
    assert u_a > 0


def test_velocity_increases_with_mass_flow(problem):
    lower = problem.compute_u_a(0.2, 0.4, 1100, 200, 1.36, 0.01)
    higher = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    assert 0 < lower < higher


def test_scaling_mass_flow_and_area_together_keeps_velocity(problem):
    base = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    scaled = problem.compute_u_a(0.5, 0.4, 1100, 200, 1.36, 0.02)
    assert scaled == pytest.approx(base, rel=1e-12)


def test_scaling_mass_flow_and_density_together_keeps_velocity(problem):
    base = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    scaled = problem.compute_u_a(0.5, 0.8, 1100, 200, 1.36, 0.01)
    assert scaled == pytest.approx(base, rel=1e-12)


def test_choked_mass_flow_gives_nan(problem):
    feasible = problem.compute_u_a(0.25, 0.4, 1100, 200, 1.36, 0.01)
    choked = problem.compute_u_a(10.0, 0.4, 1100, 200, 1.36, 0.01)
    assert math.isfinite(feasible)
    assert math.isnan(choked)
    assert problem.invalid_ret([choked]) is True
    assert problem.invalid_ret([feasible]) is False


def test_fitness_returns_one_value_per_objective_and_constraint(problem):
    result = problem.fitness(SAMPLE_DESIGN)
    assert len(result) == 1 + problem.get_nec() + problem.get_nic()


def test_fitness_of_sample_design_is_not_finite(problem):
    result = problem.fitness(SAMPLE_DESIGN)
    assert math.isnan(result[0])
    assert problem.invalid_ret(result)


def test_fitness_accepts_tuple(problem):
    from_list = problem.fitness(SAMPLE_DESIGN)
    from_tuple = problem.fitness(tuple(SAMPLE_DESIGN))
    assert len(from_tuple) == len(from_list)
    assert math.isnan(from_tuple[0]) == math.isnan(from_list[0])


@pytest.mark.parametrize("length", [0, 11, 13])
def test_fitness_rejects_wrong_length(problem, length):
    with pytest.raises(ValueError):
        problem.fitness([1.0] * length)