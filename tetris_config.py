"""Fixed dimensions and tunable gameplay numbers"""

HEIGHT, WIDTH = 20, 10            # Grid dimensions (rows, columns)
TETROMINO_HEIGHT, TETROMINO_WIDTH = 2, 4
CELLS_IN_TETROMINO = 4

CONFIG = {
    # Scoring & progression
    "SCORE_TABLE": {1: 100, 2: 300, 3: 700, 4: 1500},
    "LEVEL_SCORE_STEP": 600,      # points needed per level
    "MAX_LEVEL": 10,
    "MAX_SPEED": 10,

    # Persistence
    "HIGH_SCORE_FILE": "high_score.txt",

    # Piece picker; None => seeded from the clock
    "SEED": None,

    # Front-end feel
    "CELL_SIZE": 30,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "BASE_TICK_MS": 1000,
    "TICK_STEP_MS": 90,
    "MIN_TICK_MS": 100,

    "LOG_LEVEL": "INFO",
}
