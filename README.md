# humania

A small side-scrolling arcade game built on pygame. Walk right through a
scrolling level, jump over parrots, crabs, snakes and birds, and collect
coins.

## Installing

```
pip install .
```

## Playing

The game loads its images from `Images/` and its sounds and music from
`Music/`, both relative to the current directory, so start it from a
directory that holds those folders:

```
humania
```

The window is 1000 × 600 pixels and titled "HU Mania".

- On the title screen press **P** to start; any other key prints
  "Invalid key".
- **Left** / **Right** arrow keys walk. Once the player is 350 pixels from
  the left edge, **Right** scrolls the level, the coins and the enemies
  instead of moving the player further.
- **Up** jumps: the player rises for 900 ms and then falls for 900 ms.
- Each enemy that touches the player is removed and takes 60 pixels off the
  300-pixel health bar; when the bar is empty the game is lost. Enemies that
  leave the screen on the left come back on the right.
- Each coin is worth 5 points; reaching 25 points wins.
- Closing the window during play ends the round as lost.
- On the end screen press **R** to play again or **Q** (or close the window)
  to quit.

### Assets

The package ships no images or sounds. It looks for:

- `Images/sprsheet.png`, `Images/Game_on.png`, `Images/parallax.png`,
  `Images/green.png`, `Images/white.png`, `Images/obstacles2.png`,
  `Images/obastacle3.png`, `Images/coin.png`, `Images/game_won.jpg`,
  `Images/game-over.jpg`
- `Music/ThemeSong.wav`, `Music/smb_jump.wav`, `Music/smb_bump.wav`,
  `Music/smb_coin.wav`, `Music/smb_world_clear.wav`,
  `Music/smb_gameover.wav`

A file that cannot be loaded is reported on standard output and then simply
not drawn or played; the game still runs. Sounds are only loaded when the
audio device could be opened.

## Using the pieces

The game logic can be stepped and checked without opening a window:

- `humania.timer.Timer` – a pausable millisecond stopwatch (`start`, `stop`,
  `pause`, `resume`, `ticks`, `is_started`, `is_paused`); it takes an
  optional clock function.
- `humania.player.Mario` – position, health bar, score, jumping and the
  walking animation (`check_jump`, `make_jump`, `change_state`,
  `increase_score`, `decrease_health`); it takes an optional clock function.
  `PlayerState` holds the animation frames.
- `humania.obstacles` – `Obstacle` and its kinds `Parrot`, `Crab`, `Snake`
  and `Bird`, each with its own speed and animation (`render`, `step`,
  `scroll_with_background`).
- `humania.coins` – `Coin` and `CoinGenerator` (`generate_coins`,
  `render_coins`, `scroll_coins`, `clear`); the generator takes an optional
  `random.Random`.
- `humania.obstacle_generator.ObstacleGenerator` – `generate_obstacles`,
  `render_obstacles`, `scroll_obstacles`, `clear`; it takes an optional
  `random.Random`.
- `humania.assets` – `load_texture`, `load_sound` and `play_sound`.
- `humania.game.Game` ties these together (`init`, `load_media`, `draw_bg`,
  `startup`, `run`, `game_finished`, `close`) and accepts an injected random
  generator, clock, key-state function and frame delay.
  `humania.game.main` is what the `humania` command runs.

Passing `None` as the drawing target to the `render` methods updates the
objects without drawing anything.

## What it does not do

There are no levels beyond the single generated one, no saved scores and
no settings; the keys, window size and asset paths are fixed.

## Running the tests

```
pip install .[test]
pytest
```