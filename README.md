# eightball

A two-player eight-ball pool game. Players take turns striking the white
ball with the mouse. A small 2D physics engine simulates the table. The
best final scores are kept in a plain-text ranking file.

## Installing

```
pip install .
```

The game draws with `pygame`, which is installed with the package.

## Playing

```
eightball
```

The command opens a 1280×720 window. It takes no options apart from `--help`.
It returns -1 if the display cannot be set up.

- **Main menu**: *Start Game* begins a match. *Reset* clears the ranking. *Quit* leaves the game.
- **Aiming**: press the left mouse button on the white ball. Drag away from the direction you want to shoot, then release. A longer drag gives a stronger shot. Very short drags are ignored.
- **Spin**: before a shot, hold the left button inside the small ball at the bottom of the screen. This chooses where the cue strikes. Left and right give side spin. Up and down give follow and draw. The choice resets after every turn.
- **Pause**: press `Esc` to open or close the pause menu. It offers *Resume*, *Reset* (starts a new game) and *Main Menu*.

### Rules

- Balls potted in a turn are scored when all balls have stopped.
- If the current player has no group yet, the first ball scored decides the groups: solids or stripes.
- A player keeps the turn after potting a ball of their own group without a foul.
- Potting the white ball is a foul, and the white ball goes back to its spot.
- Potting a ball of the other group is also a foul.
- A turn in which nothing is potted passes the turn to the other player.
- Potting the 8-ball ends the game. You win if all your group is already cleared. If not, or if you have no group yet, your opponent wins.

### Score and ranking

At the end of the game the winner types a name. Spaces become underscores, and the limit is 14 characters. The *Save Score* button works once the name has at least three characters. The score starts at 1000 and then:

- loses 30 for every turn;
- gains 20 for every ball of the winner's group that they potted;
- loses 100 for every foul;
- loses 500 if the game was lost on the 8-ball.

The score never goes below zero. After saving, the screen shows the ranking and offers *Main Menu* and *Retry*. The main menu shows the top five scores.

## What the package does not include

The package ships no image or font files. The game looks for them relative to the directory it is started from:

- `../assets/images/table.png`
- `../assets/images/balls.png`, a 4×4 sprite sheet of balls
- `../assets/fonts/Minitel.ttf`
- `../assets/fonts/m04.ttf`

If a file is missing, whatever uses it is not drawn. The game still runs.

The ranking is kept in `../assets/data/ranking.txt`. The file is created if it is missing, but its directory must already exist before a score can be saved.

## Using the pieces

The simulation can run without a window:

- `eightball.rack.generate_rack(rng)` returns the fifteen `BallPlacement`s of the starting triangle. The 1-ball is at the apex, the 8-ball is in the middle, and there is a solid and a stripe on the second row.
- `eightball.physics.PhysicsSystem` tests every pair of bodies. It fires `on_trigger` for trigger colliders and resolves other contacts with `resolve_collision`.
- `eightball.objects` provides `Ball`, `Wall` and `HoleTrigger`.
- `eightball.rules.GameRules` keeps the turn, groups, points, fouls and the winner.
- `eightball.ranking.Ranking` reads and writes the ranking file. Each line of that file holds a name and a score. `add_entry` keeps the entries sorted from best to worst.

```python
import random
from eightball.rack import generate_rack

for placement in generate_rack(random.Random(1)):
    print(placement.number, placement.row, placement.column)
```