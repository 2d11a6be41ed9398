# --- Display ---
WIDTH = 800
HEIGHT = 450
FPS = 60
TITLE = "Scrolling Platformer"

# --- Simulation ---
SIM_DT = 1.0 / 60.0         # fixed step (sec); gravity/speed below are per step
MAX_FRAME_DT = 0.25         # clamp stalls before feeding the accumulator
TIMER_EPS = 1e-6            # timers this close to zero count as expired

# --- World / Physics ---
GRAVITY = 0.5               # px/step^2
JUMP_VY = -10.0             # px/step
FALL_MARGIN = 100           # respawn once y > HEIGHT + FALL_MARGIN

# --- Player ---
SPAWN_X = 100.0
SPAWN_Y = 100.0
PLAYER_W = 40
PLAYER_H = 40
BASE_SPEED = 5.0            # px/step
MAX_JUMPS = 2

# --- Dash ---
DASH_SPEED = 15.0           # px/step
DASH_TIME = 0.2             # sec
DASH_COOLDOWN = 1.0         # sec

# --- Particles ---
MAX_PARTICLES = 100
BURST_COUNT = 20
BURST_OFFSET = (20.0, 20.0)  # from player top-left
PARTICLE_SPEED_STEPS = 20    # velocity = randint(-20, 20) / 10
PARTICLE_SIZE_MIN = 2
PARTICLE_SIZE_MAX = 6

# --- Flag ---
FLAG_W = 40
FLAG_H = 80

# --- Level layout: (x, y, w, h, vx, vy, start_x, start_y, move_distance, moving) ---
PLATFORM_LAYOUT = (
    (0,    400, 800, 20, 0, 0, 0,    400, 0,   False),  # ground
    (200,  300, 200, 20, 2, 0, 200,  300, 100, True),
    (500,  200, 150, 20, 0, 2, 500,  200, 100, True),
    (800,  300, 200, 20, 0, 0, 800,  300, 0,   False),
    (1200, 200, 150, 20, 0, 0, 1200, 200, 0,   False),
)
FLAG_POS = (1400.0, 150.0)
LEVEL_WIDTH = FLAG_POS[0] + FLAG_W

# --- Audio ---
JUMP_SOUND = "assets/jump.wav"  # relative to the package dir

# --- Observation scaling ---
OBS_MAX_VY = 20.0
OBS_NEAREST_PLATFORMS = 2

# --- Colors (RGB) ---
COLOR_SKY = (102, 191, 255)
COLOR_PLAT = (130, 130, 130)
COLOR_FLAG = (0, 228, 48)
COLOR_PLAYER = (0, 121, 241)
COLOR_PARTICLE = (255, 255, 255)
COLOR_SPIKE = (230, 41, 55)
COLOR_TEXT = (0, 0, 0)
COLOR_DANGER = (230, 41, 55)
COLOR_HUD = (20, 40, 70)
