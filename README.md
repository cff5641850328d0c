# mambasim

A small simulation of a five-player basketball team in which some players
have a "mamba mentality": they keep their confidence after a miss and keep
taking shots. Over a fixed number of possessions (`MAX_POSSESSION`, 100) the
team picks a shooter each time, weighted by each player's current mental
state, and every player's mental state and shot accuracy change with the
results.

## How the model works

- A player's mental state goes up after a made shot
  (`mental_coefficient * shot_base`), goes down after a miss
  (`2 * mental_coefficient * (1 - mamba)`), and recovers by `heal_rate`
  while someone else shoots. It is clamped at zero.
- After each shot a player's accuracy moves from their base percentage
  towards their actual hit rate, weighted by `shot_accuracy_rate` and a
  logistic curve over the number of shots they have taken.
- The shooter is chosen with Bradley–Terry weights (`mental / (0.5 + total
  mental)`) from the players' mental states. Because of the 0.5 offset, a
  possession may have no chosen shooter; it still ends in a shot made with
  probability `fallback_shot_percentage`, and is recorded with shooter `6`.
- Each made shot is worth two points. After every possession a
  `StatsRecord` holds the possession number, the score, the shooter
  (numbered 1 to 5, or 6 for none) and every player's mental state,
  accuracy, makes and misses.

Random draws come from `mambasim.utils.rand_float`, a cryptographically
random float in [0, 1). `Team` and `Game` accept a `rand` callable in its
place, which makes runs reproducible.

## Installation

```
pip install .
```

## Command line

```
mambasim [--config PATH] [--output PATH]
```

The command reads a model configuration in JSON, plays one game, and writes
the stats sheet of every possession as a compact JSON array. By default it
reads `../_fixture/sample_config.json` and writes
`../_fixture/sample_output.json`, relative to the current directory. It exits
with status 1 and a message on standard error if the configuration cannot be
read or is invalid, or if the output cannot be written.

A configuration looks like:

```json
{
  "mamba_num": 1,
  "mamba_shot_percentage": 0.65,
  "player_shot_percentage": 0.5,
  "mamba_mental": 1,
  "mental_coefficient": 0.1,
  "heal_rate": 0.05,
  "shot_accuracy_rate": 0.5,
  "logistic_k": 5,
  "logistic_x0": 1,
  "fallback_shot_percentage": 0.3
}
```

Missing keys default to zero and unknown keys are ignored; `mamba_num` must
be an integer and the other values numbers. The first `mamba_num` players
(0 to 5) are built with the mamba settings; the remaining players share the
rest of a total mental value of 2.5 and use `player_shot_percentage`.

Each record in the output has the keys `poss`, `score`, `shooter`, and for
players 1 to 5 `mentalN`, `shot_accuracyN`, `madeN` and `missedN` — except
that player 1's miss count is written under the key `maded1`.

## Library use

```python
from mambasim.config import load
from mambasim.generator import generate
from mambasim.game import Game, GameConfig

model = load("sample_config.json")
players = generate(model.generator_config())
game = Game(players, GameConfig(fallback_shot_percentage=model.fallback_shot_percentage))
game.play()

for record in game.stats_sheet:
    print(record.to_dict())
```

Modules:

- `mambasim.utils` — `logistic`, `bradley_terry`, `rand_float`.
- `mambasim.player` — `Player`, `PlayerConfig`, `PlayerState`,
  `PlayerStats`; a player has `update(is_made)`, `heal()` and `scale()`.
- `mambasim.team` — `Team` with `select_shooter()` and
  `update(shooter_index, is_made)`.
- `mambasim.generator` — `GeneratorConfig` and `generate(config)`, which
  raises `ValueError` if `mamba_num` is outside 0 to 5.
- `mambasim.config` — `ModelConfig` (with `from_dict` and
  `generator_config`) and `load(path)`, which raises `ValueError` on
  malformed JSON or values of the wrong type.
- `mambasim.game` — `GameConfig`, `StatsRecord` (with `to_dict()`),
  `PlayerSnapshot` and `Game`.

## What it does not do

The package plays one game per run and writes its raw per-possession
records. It does not run repeated games, aggregate results across runs, or
chart the output.

## Running the tests

```
pip install ".[test]"
pytest
```