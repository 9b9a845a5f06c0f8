"""One-dimensional turbojet cycle model posed as an optimisation problem."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from jetopt.roots import EvaluationError, newton_raphson_iterate


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _pow(base: float, exponent: float) -> float:
    """Raise to a power, yielding NaN or infinity where the result is undefined."""
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


class JetCalcProblem:
    """Specific-impulse objective for a single-spool turbojet design."""

    # Gas properties
    R = 287.0
    GAM_C = 1.4
    GAM_H = 1.36
    C_PC = R * (GAM_C / (GAM_C - 1))
    C_PH = R * (GAM_H / (GAM_H - 1))

    # Ambient conditions
    TS_0 = 288.0
    PS_0 = 101325.0
    PS_6 = PS_0
    U_0 = 0.0

    # Fuel heating value
    H_KER = 43e6

    # Component efficiencies and solidity
    ETA_C = 0.75
    ETA_T = 0.75
    SIGMA_C = 1.6

    PENALTY = 1e6
    STANDARD_GRAVITY = 9.8066

    def get_nec(self) -> int:
        """Number of equality constraints."""
        return 0

    def get_nic(self) -> int:
        """Number of inequality constraints."""
        return 0

    def get_bounds(self) -> tuple[list[float], list[float]]:
        """Lower and upper bounds of the decision vector; none are set."""
        return [], []

    def invalid_ret(self, values: Iterable[float]) -> bool:
        """Whether any value is infinite or NaN."""
        return any(not math.isfinite(value) for value in values)

    def _penalty(self) -> list[float]:
        return [self.PENALTY] * (1 + self.get_nec() + self.get_nic())

    def fitness(self, x: Sequence[float]) -> list[float]:
        """Evaluate the design vector, returning ``[objective, constraints...]``.

        The vector holds shaft speed, compressor inlet velocity, combustor
        exit temperature, compressor inlet hub and tip radii, compressor
        outlet area and meanline radius, compressor temperature rise, and
        four turbine geometry values.  A failed axial-velocity solve yields
        a penalty vector.
        """
        (
            omega,
            u_i,
            t_4,
            r_cih,
            r_cit,
            a_co,
            r_com,
            d_t_c,
            _r_tih,
            _r_tit,
            _a_to,
            _r_tom,
        ) = (float(value) for value in x)

        gam_c_exp = self.GAM_C / (self.GAM_C - 1)
        gam_h_exp = self.GAM_H / (self.GAM_H - 1)
        nozzle_exp = (self.GAM_H - 1) / self.GAM_H

        try:
            # Stagnation conditions
            t_0 = self.TS_0 + (self.U_0 * self.U_0) / (2 * self.C_PC)
            # Duct
            ts_2 = t_0 - (u_i * u_i) / (2 * self.C_PC)
            ps_2 = _pow(_div(ts_2, t_0), gam_c_exp)
            rhos_2 = _div(ps_2, self.R * ts_2)
            a_ci = math.pi * (r_cit * r_cit - r_cih * r_cih)
            m_dot = rhos_2 * u_i * a_ci
            # Compressor
            p_spc = self.C_PC * d_t_c
            t_3 = t_0 + d_t_c
            p_3 = _pow(_div(t_0 + self.ETA_C * d_t_c, t_0), gam_c_exp)
            u_coth_stat = _div(self.C_PC * d_t_c, omega + r_com)
            # Solved for its failure mode: an unsolvable outlet flow is penalised.
            self.compute_u_a(
                m_dot, _div(p_3, self.R * t_3), t_3, u_coth_stat, self.GAM_C, a_co
            )
            # Combustor
            fuel_ratio = _div(
                self.C_PH * t_4 - self.C_PC * t_3, self.H_KER - self.C_PH * t_4
            )
            # Turbine
            d_t_t = -_div(p_spc, self.C_PH * (1 + fuel_ratio))
            t_5 = t_4 + d_t_t
            p_5 = _pow(_div(t_4 + d_t_t / self.ETA_T, t_4), gam_h_exp)
            # Nozzle
            ts_6 = t_5 * _pow(_div(self.PS_6, p_5), nozzle_exp)
            a_6 = _pow(self.GAM_H * R_TIMES(self, ts_6), 0.5)
            u_6 = a_6 * _pow(
                (2 / (self.GAM_H - 1)) * (_pow(_div(p_5, self.PS_6), nozzle_exp) - 1),
                0.5,
            )
            thrust = m_dot * ((1 + fuel_ratio) * u_6 - self.U_0)
            isp = _div(thrust, m_dot * fuel_ratio * self.STANDARD_GRAVITY)
        except EvaluationError:
            return self._penalty()
        return [isp]

    def compute_u_a(
        self,
        m_dot: float,
        rho_t: float,
        t_t: float,
        u_th: float,
        gam: float,
        area: float,
    ) -> float:
        """Axial velocity of adiabatic duct flow on the subsonic branch.

        Takes mass flow, stagnation density, stagnation temperature,
        tangential velocity, ratio of specific heats and flow area.  Returns
        NaN when the solution does not satisfy the mass balance.
        """
        c_p = self.R * _div(gam, gam - 1)
        exponent = _div(1.0, 1 - gam)
        # Where the mass-flow derivative vanishes; the subsonic root lies below.
        u_a_max = _pow(
            _div(
                (gam - 1) * rho_t * (2 * c_p * t_t - u_th * u_th),
                (1 + gam) * rho_t,
            ),
            0.5,
        )

        def residual(u_a: float) -> tuple[float, float]:
            speed_sq = u_a * u_a + u_th * u_th
            t_s = t_t - _div(speed_sq, 2 * c_p)
            tau = _div(t_t, t_s)
            value = m_dot - u_a * area * rho_t * _pow(tau, exponent)
            derivative = _div(
                area
                * rho_t
                * (
                    2 * c_p * (gam - 1) * t_t
                    - (1 + gam) * u_a * u_a
                    - (gam - 1) * u_th * u_th
                )
                * _pow(_div(t_t, t_t - _div(speed_sq, 2.0 * c_p)), exponent),
                (gam - 1) * (speed_sq - 2 * c_p * t_t),
            )
            return value, derivative

        u_a = newton_raphson_iterate(residual, 0.0, 0.0, u_a_max, 8, 50)
        if abs(residual(u_a)[0]) > 1e-6 or not math.isfinite(u_a):
            return math.nan
        return u_a


def R_TIMES(problem: JetCalcProblem, temperature: float) -> float:
    """Gas constant times a static temperature."""
    return problem.R * temperature