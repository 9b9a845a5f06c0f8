# jetopt

A small thermodynamic model of a single-spool turbojet, set up as the
objective of an optimisation problem. Given a vector of twelve design
variables, it works through the duct, compressor, combustor, turbine and
nozzle and returns the specific impulse of the engine.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
jetopt
```

This solves one sample duct-flow case. The inputs are mass flow 0.25,
stagnation density 0.4, stagnation temperature 1100, tangential velocity
200, γ = 1.36 and area 0.01. The command prints `computed u_a: ...` with
up to ten significant digits, then the time the solve took in
microseconds. If the root finder raises `EvaluationError`, the command
prints `Invalid input to u_a:` and the error message instead. It takes no
options other than `-h/--help`, and it exits with status 0.

## Library use

```python
from jetopt.jet_calc import JetCalcProblem

problem = JetCalcProblem()

# Axial velocity of adiabatic duct flow (subsonic branch)
u_a = problem.compute_u_a(0.25, 0.4, 1100.0, 200.0, 1.36, 0.01)

# Specific impulse of a candidate design
x = [omega, u_i, T_4, R_Cih, R_Cit, A_Co, R_Com, D_T_C, R_Tih, R_Tit, A_To, R_Tom]
result = problem.fitness(x)
```

### `JetCalcProblem`

- `fitness(x)` takes exactly twelve values, in this order:
  1. shaft speed
  2. compressor inlet velocity
  3. combustor exit total temperature
  4. compressor inlet hub radius
  5. compressor inlet tip radius
  6. compressor outlet area
  7. compressor outlet meanline radius
  8. compressor total temperature change
  9. to 12. four turbine geometry values, which are accepted but not used

  It returns `[isp]`. When the compressor-outlet axial-velocity solve
  raises `EvaluationError`, it returns the penalty vector `[1e6]`
  instead. Other impossible designs are not replaced by the penalty. They
  show up as NaN or infinite values in the result, and you can detect
  them with `invalid_ret`.
- `compute_u_a(m_dot, rho_t, t_t, u_th, gam, area)` solves the mass-flow
  balance for the axial velocity. It searches between zero and the
  velocity at which the mass-flow derivative vanishes. It returns NaN if
  the result leaves a residual above 1e-6 or is not finite. It lets
  `EvaluationError` from the root finder propagate.
- `invalid_ret(values)` is true if any value is NaN or infinite.
- `get_nec()` and `get_nic()` both return 0.
- `get_bounds()` returns `([], [])`.
- Class attributes hold the fixed parameters:
  - gas constants `R`, `GAM_C`, `GAM_H`, `C_PC`, `C_PH`
  - ambient conditions `TS_0`, `PS_0`, `PS_6`, `U_0`
  - fuel heating value `H_KER`
  - efficiencies `ETA_C`, `ETA_T`
  - solidity `SIGMA_C`
  - `PENALTY` and `STANDARD_GRAVITY`

### `jetopt.roots`

`newton_raphson_iterate(func, guess, lower, upper, digits, max_iter)`
finds a root of `func` inside `[lower, upper]`. `func` must return the
pair `(f(x), f'(x))`.

- A step that leaves the bracket, or that fails to converge, is replaced
  by bisection.
- Iteration stops when the step falls below `2**(1 - digits)` relative to
  the estimate, or after `max_iter` evaluations.
- It raises `EvaluationError` (a subclass of `ArithmeticError`) in two
  cases: the bounds are in the wrong order, or the bracket no longer
  encloses a sign change.

## What the package does not do

- It contains no optimiser. `JetCalcProblem` only evaluates designs, and
  `get_bounds()` declares no bounds for the design variables.
- The compressor and turbine are modelled only as far as the objective
  needs. No blade, Mach-number or diffusion constraints are returned, and
  the turbine geometry inputs have no effect on the result.