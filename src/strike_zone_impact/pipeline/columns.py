"""Statcast column bindings and the derived columns the pipeline appends."""

# Source columns interpreted by the pipeline; everything else passes through.
BATTER = "batter"
SZ_BOT = "sz_bot"
SZ_TOP = "sz_top"
PLATE_X = "plate_x"
PLATE_Z = "plate_z"
DESCRIPTION = "description"
EVENTS = "events"
XWOBA = "estimated_woba_using_speedangle"
DELTA_RUN_EXP = "delta_run_exp"
LAUNCH_SPEED = "launch_speed"
INNING_TOPBOT = "inning_topbot"
HOME_TEAM = "home_team"
AWAY_TEAM = "away_team"
GAME_PK = "game_pk"
AT_BAT_NUMBER = "at_bat_number"

METRICS = (XWOBA, DELTA_RUN_EXP, LAUNCH_SPEED)

# Derived
BATTER_NAME = "batter_name"
BATTER_BBREF_ID = "batter_bbref_id"
BATTING_TEAM = "batting_team"
HEIGHT_IN = "height_in"
PLATE_X_IN = "plate_x_in"
PLATE_Z_IN = "plate_z_in"
LEGACY_BOTTOM = "legacy_zone_bottom"
LEGACY_TOP = "legacy_zone_top"
LEGACY_HEIGHT = "legacy_zone_height"
LEGACY_AREA = "legacy_zone_area"
PROPORTIONAL_BOTTOM = "proportional_zone_bottom"
PROPORTIONAL_TOP = "proportional_zone_top"
PROPORTIONAL_HEIGHT = "proportional_zone_height"
PROPORTIONAL_AREA = "proportional_zone_area"
LEGACY_IN_ZONE = "legacy_in_zone"
PROPORTIONAL_IN_ZONE = "proportional_in_zone"
ZONE_TRANSITION = "zone_transition"

SOURCE_COLUMNS = (
    BATTER,
    SZ_BOT,
    SZ_TOP,
    PLATE_X,
    PLATE_Z,
    DESCRIPTION,
    EVENTS,
    XWOBA,
    DELTA_RUN_EXP,
    LAUNCH_SPEED,
    INNING_TOPBOT,
    HOME_TEAM,
    AWAY_TEAM,
    GAME_PK,
    AT_BAT_NUMBER,
)

DERIVED_COLUMNS = (
    BATTER_NAME,
    BATTER_BBREF_ID,
    BATTING_TEAM,
    HEIGHT_IN,
    PLATE_X_IN,
    PLATE_Z_IN,
    LEGACY_BOTTOM,
    LEGACY_TOP,
    LEGACY_HEIGHT,
    LEGACY_AREA,
    PROPORTIONAL_BOTTOM,
    PROPORTIONAL_TOP,
    PROPORTIONAL_HEIGHT,
    PROPORTIONAL_AREA,
    LEGACY_IN_ZONE,
    PROPORTIONAL_IN_ZONE,
    ZONE_TRANSITION,
)
