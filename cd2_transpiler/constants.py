class Defaults:
    PRETTY_PRINT = True
    INDENT = 4
    STRICT = False
    # None follows the input file
    RAW_MULTILINE_DESCRIPTION: bool | None = None
    OUTPUT_MARKER = "cd2"
    CONFIG_FILE = "cd2_transpiler.toml"
    EXTENSION_PREFIX = "_"


class Modules:
    DIFFICULTY_SETTING = "DifficultySetting"
    RESUPPLY = "Resupply"
    ENEMIES = "EnemiesNoSync"
    ESCORT_MULE = "EscortMule"


class SourceFields:
    NAME = "Name"
    DESCRIPTION = "Description"
    PAWN_STATS = "PawnStats"
    ENEMY_DESCRIPTORS = "EnemyDescriptors"
    RESUPPLY_COST = "ResupplyCost"
    ESCORT_MULE = "EscortMule"


class EnemyFields:
    BASE = "Base"
    ELITE = "Elite"
    FORCE_ELITE_BASE = "ForceEliteBase"


class Mutators:
    STARTING_NITRA = "StartingNitra"
    BY_RESUPPLIES_CALLED = "ByResuppliesCalled"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
