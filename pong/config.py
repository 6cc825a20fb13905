# Arena: (0, 0) is the bottom-left corner
ARENA_WIDTH = 100.0
ARENA_HEIGHT = 100.0
HALF_WIDTH = ARENA_WIDTH * 0.5
HALF_HEIGHT = ARENA_HEIGHT * 0.5

# Paddles
PADDLE_WIDTH = 4.0
PADDLE_HEIGHT = 16.0
PADDLE_LEFT_X = PADDLE_WIDTH * 0.5
PADDLE_RIGHT_X = ARENA_WIDTH - PADDLE_WIDTH * 0.5
PADDLE_INITIAL_Y = HALF_HEIGHT
PADDLE_SPEED = 72.0  # units/sec

# Ball
BALL_RADIUS = 2.0
BALL_VELOCITY_X = 30.0  # units/sec
BALL_VELOCITY_Y = 15.0
BALL_ACCELERATION = 0.2  # +20% per paddle hit
BALL_MAX_VELOCITY_X = abs(BALL_VELOCITY_X) * 2.0
BALL_MAX_VELOCITY_Y = abs(BALL_VELOCITY_Y) * 2.0
BALL_WAITING_TIME = 2.0  # seconds before a (re)spawned ball moves
BALL_CYCLE_PERIOD = 0.5  # full pulse period while waiting

# Colors (RGBA, 0..1)
WHITE = (1.0, 1.0, 1.0, 1.0)
BALL_COLOR = (1.0, 0.35, 0.1, 1.0)

# Scores
SCORE_LIMIT = 999

# Window
WINDOW_SIZE = 800
ARENA_SCALE = WINDOW_SIZE / ARENA_WIDTH
FPS = 60
BACKGROUND = (0, 0, 0)
