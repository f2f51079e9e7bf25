# volsample

Sampling tools, exact volumes and inscribed balls for convex bodies, built on NumPy and SciPy.

## What it offers

- `volsample.sphere`: uniform unit directions (`get_direction`), uniform points inside a ball (`point_in_sphere`) and on a hypersphere (`point_on_sphere`), all centred at the origin and drawn from a `numpy.random.Generator`.
- `volsample.simplex`: exact uniform sampling from the unit simplex (`sample_unit_simplex`), the canonical simplex (`sample_canonical_simplex`) and the simplex spanned by given vertices (`sample_arbitrary_simplex`). Each returns an array with one point per row and takes an optional `seed`.
- Convex bodies:
  - `volsample.ball.Ball`: a ball given by a centre and a *squared* radius, with membership, line-intersection and reflection oracles. The oracles treat the ball as centred at the origin.
  - `volsample.vpolytope.VPolytope`: the convex hull of the rows of a vertex matrix, with membership, ray shooting, chord computation, reflection, shifting, linear transformation and `compute_inner_ball`.
  - `volsample.ellipsoid.CopulaEllipsoid`: the quadratic form `p^T G p` of a square matrix `G`.
  - `volsample.lmi.LMI` and `volsample.lmi.Spectrahedron`: a linear matrix inequality `A_0 + sum x_i A_i`, its evaluation and the normalized gradient of its determinant.
- `volsample.oracles`: linear-programming oracles for V-polytopes and zonotopes: `is_in_vpolytope`, `intersect_line_vpolytope`, `intersect_double_line_vpolytope`, `is_in_zonotope`, `intersect_line_zonotope`.
- `volsample.lp`: the Chebyshev ball of `{x | A x <= b}` (`chebyshev_ball`) and a point in the intersection of two V-polytopes (`point_in_intersection`).
- `volsample.rdhr_walk.RDHRWalk`: a random-directions hit-and-run walk for any body with a `line_intersect(r, v)` method, such as `Ball` and `VPolytope`.
- `volsample.sampling`: drivers that run a walk with burn-in and collect samples: `random_points`, `uniform_sampling`, and, for walk types you supply, `gaussian_random_points`, `gaussian_sampling`, `boundary_random_points`, `uniform_sampling_boundary`.
- `volsample.api`: `direct_sampling`, `exact_vol`, `inner_ball` and the `PolytopeSpec` description of a polytope.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Draw 100 uniform points from the interior of the 2-dimensional unit ball:

```python
from volsample.api import direct_sampling

points = direct_sampling({"type": "ball", "dimension": 2, "seed": 5}, 100)
print(points.shape)  # (2, 100): one point per column
```

The body types are `"unit_simplex"`, `"canonical_simplex"`, `"hypersphere"` and `"ball"`; `"dimension"` must be at least 2. A `"radius"` (default 1, used by the sphere and ball) and a `"seed"` are optional.

Sample the unit simplex directly:

```python
from volsample.simplex import sample_unit_simplex

pts = sample_unit_simplex(3, 1000, seed=42)  # shape (1000, 3)
```

Exact volume of a simplex in V-representation, and an inscribed ball:

```python
import numpy as np
from volsample.api import PolytopeSpec, exact_vol, inner_ball

V = np.array([[2.0, 3.0], [-1.0, 7.0], [0.0, 0.0]])
P = PolytopeSpec(type="Vpolytope", V=V)
print(exact_vol(P))   # 8.5
print(inner_ball(P))  # centre coordinates followed by the radius
```

`exact_vol` returns a declared positive `volume` when one is set. Otherwise it handles a V-polytope with exactly `d + 1` vertices and a zonotope, whose rows of `G` are generators of segments `[-g, g]`. `inner_ball` accepts all four representations: `"Hpolytope"`, `"Vpolytope"`, `"Zonotope"` and `"VpolytopeIntersection"`.

Uniform samples from a ball with the hit-and-run walk:

```python
import numpy as np
from volsample.ball import Ball
from volsample.rdhr_walk import RDHRWalk
from volsample.sampling import uniform_sampling

rng = np.random.default_rng(1)
body = Ball(np.zeros(3), 1.0)
samples = uniform_sampling(RDHRWalk, body, rng, walk_len=5, rnum=200,
                           starting_point=np.zeros(3), nburns=50)
print(samples.shape)  # (200, 3)
```

## Errors

Invalid input raises `ValueError`. Examples are a missing dimension, a radius or sample count that is not positive, an unknown body type or representation, a polytope whose volume is not known, or an empty intersection in `inner_ball`. Linear programs that have no optimal solution, such as a ray that misses the body, raise `volsample.lp.LinearProgramError`.

## What it does not do

- It does not estimate volumes by random walks. `exact_vol` covers only declared volumes, simplices and zonotopes.
- It ships only one walk, `RDHRWalk`. The Gaussian and boundary sampling drivers need a walk type that you supply.
- It has no H-polytope or zonotope body classes for the walks. Those representations appear only through `PolytopeSpec` and the oracle functions.
- It has no command-line interface and reads no input files.