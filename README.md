# pescatocha

The rules of a small fishing game as a plain Python library: the pond's fish
species, hooks that keep catalogues of caught fish, and a rod that switches
between hooks. It also has a tiny four-operation calculator.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Modules

- `pescatocha.fish`: `Species` and `Fish`. Each `Species` has inclusive
  ranges for size and weight, a reaction time in milliseconds and a pond
  weight. Most species also have an identifier (`fish_id`) and a sale value
  (`money`). `BallenaAzulAntartica` has neither, so both stay `None` on the
  fish it spawns. `Species.spawn(rng)` creates a `Fish` with a random size
  and weight within those ranges. `species_names()` lists the species in
  catalogue order. `species(name)` looks one up and raises `KeyError` for an
  unknown name. `create_fish(name, rng)` does the lookup and the spawn in one
  call.
- `pescatocha.hook`: `HookKind` (`LIGHT` = 1, `MEDIUM` = 2, `HEAVY` = 3) and
  `Hook`. A hook has one catalogue per kind. `Hook.catch(fish_id)` records the
  identifier only in the catalogue of the hook's own kind, and only once. A
  hook created without a kind records nothing. `Hook.catalog(kind)` returns the
  identifiers as a tuple, in the order they were caught. It raises
  `ValueError` for a number that is not a hook kind.
- `pescatocha.rod`: `Rod` holds one hook of each kind in `rod.hooks`. The hook
  in use is `rod.hook`, and it starts as the light hook. `select(kind)`
  switches hooks. A number that is not a hook kind is stored in
  `rod.current`, but the hook in use stays the same. `catch(fish_id)` records
  a catch on the hook in use. `upgrade()` adds 200 ms to `rod.extra_time`.
  `catalog_size(option)` and `catalog_item(option, index)` read catalogue
  `option` of the hook in use. Because a hook fills only its own catalogue,
  the other options of that hook read as empty. `catalog_item` raises
  `IndexError` when the index is out of range.
- `pescatocha.calculator`: `apply_operation(sign, accumulator, value)` applies
  `+`, `-`, `*` or `/`. Only the first character of `sign` is used. Any other
  sign returns the accumulator unchanged. Division by zero gives an infinity
  or NaN, following floating-point rules.

## Usage

### Fish

Pass in a random generator. A seeded generator always produces the same fish:

```python
import random
from pescatocha.fish import create_fish, species_names

rng = random.Random(42)
for name in species_names():
    print(create_fish(name, rng))
```

If you leave out the generator, the `random` module is used.

### Rod and hooks

```python
from pescatocha.hook import HookKind
from pescatocha.rod import Rod

rod = Rod()                    # light hook in use
rod.catch(5)
rod.catch(5)                   # already recorded, not added again
rod.upgrade()                  # extra_time is now 200
print(rod.catalog_size(1))     # 1
print(rod.catalog_item(1, 0))  # 5

rod.select(HookKind.HEAVY)
rod.catch(8)
print(rod.catalog_size(HookKind.HEAVY))  # 1
```

### Calculator

```python
from pescatocha.calculator import apply_operation

apply_operation("+", 2.0, 3.0)   # 5.0
apply_operation("/", 9.0, 3.0)   # 3.0
apply_operation("%", 9.0, 3.0)   # 9.0, unknown sign
```

## Commands

```
pescatocha        # seeds the random source from the clock and prints a greeting
pescatocha-calc   # prints the calculator's greeting
```

Both commands accept only `--help`.

## What it does not do

This is a model of the game's rules and nothing more. There is no game loop,
no screen, no pond that fish swim in, no timing of the player's reaction, no
money balance and no saved progress. The `pescatocha` command only prints a
greeting. The calculator has no interactive display, so use
`apply_operation` from Python instead.