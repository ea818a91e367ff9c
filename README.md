# tankmaze

A two-player tank battle played on one keyboard. When the game starts, it
builds a random maze and places both tanks on open cells inside it. A bullet
that hits a tank destroys it. The last tank still alive wins, and the winner
is printed to the terminal when the game ends.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

```
tankmaze
```

| Action        | Tank 1 | Tank 2      |
|---------------|--------|-------------|
| Move forward  | W      | Up arrow    |
| Move backward | S      | Down arrow  |
| Turn left     | A      | Left arrow  |
| Turn right    | D      | Right arrow |
| Fire          | Space  | Enter       |

- Press **R** to reset. The maze stays the same. Both tanks return to fixed
  starting spots, at (100, 100) and (600, 400), and all bullets are cleared.
- Close the window to quit.

A tank cannot drive into a wall cell. Bullets bounce off walls. Each bullet
disappears after a fixed number of frames. After a tank fires, it cannot fire
again until the same number of frames has passed.

The game loads the tank image from a file named `Tank Texture.PNG` in the
current directory. If that file cannot be loaded, the game logs a warning and
keeps running. In that case the tanks are not drawn at all, although they can
still move, shoot and be hit.

## Using the pieces

The package can also be used as a library:

- `tankmaze.maze.Maze` generates the maze grid, answers wall queries
  (`is_wall`), checks whether the maze is connected (`is_reachable`,
  `fix_connectivity`) and draws the maze.
- `tankmaze.bullet.Bullet` is a bullet that travels at an angle and bounces
  off walls.
- `tankmaze.tank.Tank` is a tank that moves, turns and counts down its
  firing cooldown. `tankmaze.tank.load_texture` loads its image.
- `tankmaze.game.Game` holds a match and advances it one frame at a time
  through `Game.step`, which takes a set of pressed pygame key codes and
  needs no window. `tankmaze.game.shoot` and
  `tankmaze.game.random_tank_position` are the helpers `Game` uses.

```python
import random

from tankmaze.maze import Maze
from tankmaze.game import Game

maze = Maze(11, 11)
maze.generate(random.Random(1))
game = Game(maze, random.Random(1), None)
game.step(set())
```

## What it does not do

There is no computer-controlled opponent, no score kept across rounds and no
network play. Both players share one keyboard, and the game ends as soon as
one tank is destroyed.

## Running the tests

```
pip install ".[test]"
pytest
```