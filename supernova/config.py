"""Configuration constants for the ASCII supernova animation."""

# Display parameters
WIDTH = 90  # Grid width in characters
HEIGHT = 32  # Grid height in characters
FPS = 30  # Target frame rate (also sets the simulation timestep)
TIMESTEP = 1.0 / FPS  # Seconds of simulated time per tick
CELL_ASPECT = 1.5  # Vertical distance scale, terminal cells are taller than wide
PRECISION = 64  # Floating point precision for particle arrays: 64 or 32 bits

# Ejecta parameters
MAX_PARTICLES = 450
EJECTA_SPEED_MIN = 10  # Integer speeds drawn from [10, 49]
EJECTA_SPEED_RANGE = 40
EJECTA_VERTICAL_SCALE = 0.55  # Flattens the shell to match CELL_ASPECT
EJECTA_LIFE_MIN = 2.5  # Seconds
EJECTA_LIFE_RANGE = 1.5

# Giant phase: radius pulses around GIANT_RADIUS
GIANT_RADIUS = 9.0
GIANT_PULSE_AMPLITUDE = 1.5
GIANT_PULSE_RATE = 3.0
GIANT_DURATION = 5.0

# Collapse phase
COLLAPSE_ACCELERATION = 40.0
COLLAPSE_BOUNCE_RADIUS = 3.0  # Bounce once the envelope falls below this

# Bounce phase
BOUNCE_EXPANSION_RATE = 25.0
BOUNCE_DURATION = 0.8
BOUNCE_SHELL_WIDTH = 1.5
CORE_RADIUS = 2.0  # Neutron star left behind by the bounce

# Explosion phase
EXPLOSION_START_RADIUS = 3.0
EXPLOSION_EXPANSION_RATE = 30.0
EXPLOSION_END_RADIUS = 32.0
EXPLOSION_SHELL_WIDTH = 1.6

# Nebula phase
NEBULA_EXPANSION_RATE = 6.0
NEBULA_END_RADIUS = 42.0
NEBULA_FILL_PROBABILITY = 1.0 / 12.0  # Chance a cell inside the shell shows gas

# Glyphs
BLANK_GLYPH = ' '
GIANT_GLYPH = '#'  # Stable stellar envelope
COLLAPSE_GLYPH = '@'  # Collapsing star
SHOCK_GLYPH = '*'  # Propagating shock front
NEBULA_GLYPH = '.'  # Diffuse gas
CORE_GLYPH = 'O'  # Neutron star remnant
EJECTA_GLYPH = '+'  # Ejected particles

# ANSI cursor-home + clear-to-end
CLEAR_SEQUENCE = "\033[H\033[J"

# Help text (used as the CLI --help epilog)
HELP_CONTENT = (
    "--- Phases ---\n"
    "GIANT:     massive supergiant, radius pulsing from unstable burning\n"
    "COLLAPSE:  iron core loses pressure support, envelope falls inward\n"
    "BOUNCE:    core reaches nuclear density, rebound launches the shock\n"
    "EXPLOSION: shock front tears off the outer layers, ejecta fly out\n"
    "NEBULA:    ejected gas keeps expanding around the remnant\n"
    "\n"
    "--- Legend ---\n"
    f"{GIANT_GLYPH}  stable envelope    {COLLAPSE_GLYPH}  collapsing star\n"
    f"{SHOCK_GLYPH}  shock front        {EJECTA_GLYPH}  ejecta\n"
    f"{NEBULA_GLYPH}  diffuse gas        {CORE_GLYPH}  neutron star\n"
    "\n"
    "Press Ctrl-C to quit."
)
