"""Configuration for the 2D star collision simulation."""

# =============================================================================
# POPULATION PRESETS - Choose one by uncommenting
# =============================================================================

# PRESET: DENSE (lots of early collisions)
# STAR_COUNT = 800
# SPAWN_RADIUS = 40.0

# PRESET: DEFAULT
STAR_COUNT = 400
SPAWN_RADIUS = 60.0

# PRESET: SPARSE (long-lived orbits, few mergers)
# STAR_COUNT = 150
# SPAWN_RADIUS = 120.0

# =============================================================================

STARS = {
    "count": STAR_COUNT,
    "spawn_radius": SPAWN_RADIUS,   # Stars spawn uniformly inside this disc
    "seed": None,                   # None = different universe every run

    # Gravity
    "G": 2.0,                       # Starting gravitational constant
    "G_ramp_per_second": 0.0,       # Negative values drift towards repulsion
    "max_abs_G": 10.0,              # Ramp is clamped to [-max_abs_G, max_abs_G]
    "distance_stretch": 1.0,        # Divides distance before squaring (1.0 = plain r^2)

    # Bodies
    "contact_radius": 1.0,          # Closer than this = collision instead of gravity
    "mass_range": (1.0, 10.0),
    "initial_speed_range": (0.0, 1.5),
    "despawn_distance": 1000.0,     # None disables despawning

    # Collisions
    "mass_survival_ratio": 1.5,     # Heavier/lighter below this = both destroyed
    "collision_mass_retention": 0.9,  # Fraction of mass and energy kept on merge

    # Spatial grid (N x N cells over the tracked bounds)
    "grid_subdivisions": 16,
}

PHYSICS = {
    "fixed_dt": 0.02,               # Seconds per physics tick
    "max_steps_per_frame": 5,       # Drop ticks instead of spiralling on slow frames
}

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Starfield"
}

CAMERA = {
    "size_offset": 10.0,            # Initial half-height = spawn_radius + offset
    "zoom_range": (5.0, 600.0),     # Orthographic half-height limits
    "zoom_sensitivity": 80.0,       # Half-height change per second while Z/X held
    "move_speed": 60.0,             # World units per second
    "move_trigger": 0.35,           # Cursor distance from centre (viewport units) before panning
}

COLORS = {
    "background": (0.0, 0.0, 0.03, 1.0),
    # Light to heavy
    "star_bands": (
        (1.0, 0.55, 0.35),
        (1.0, 0.85, 0.55),
        (1.0, 1.0, 0.95),
        (0.7, 0.85, 1.0),
        (0.45, 0.6, 1.0),
    ),
    "point_size": 3.0,
    "text": (0.7, 0.8, 0.9)
}
