"""Configuration for gemmit.

User settings are loaded from ~/.gemmit/config.yaml.
Use 'gemmit config' commands to modify settings.
"""


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.gemmit/config.yaml doesn't set them

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_DIFF_CHARS = 50000

# Number of commit message suggestions requested from the model
SUGGESTION_COUNT = 3


# ============================================================
# COMMIT ERROR PHRASES
# ============================================================
# git reports commit failures as free-form text only. These lower-case
# phrases are matched against that text to classify a failed commit.

DEFAULT_NOTHING_TO_COMMIT_PHRASES = [
    "nothing to commit",
    "no changes added to commit",
    "changes not staged for commit",
]

DEFAULT_SIGNING_FAILED_PHRASES = [
    "gpg failed to sign the data",
    "no default secret key",
    "cannot run gpg",
    "signing failed",
]


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_MODEL = DEFAULT_MODEL
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE
NOTHING_TO_COMMIT_PHRASES = list(DEFAULT_NOTHING_TO_COMMIT_PHRASES)
SIGNING_FAILED_PHRASES = list(DEFAULT_SIGNING_FAILED_PHRASES)


def load_config():
    """Load configuration from the global config file.

    This should be called by the CLI before using the LLM.

    Raises:
        GlobalConfigError: If the config file exists but cannot be read.
    """
    global ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE
    global NOTHING_TO_COMMIT_PHRASES, SIGNING_FAILED_PHRASES

    # Import here to avoid circular dependency
    from gemmit import global_config

    model = global_config.get_active_model()
    max_tokens = global_config.get_max_tokens()
    temperature = global_config.get_temperature()
    extra_phrases = global_config.get_commit_error_phrases()

    if model:
        ACTIVE_MODEL = model
    if max_tokens is not None:
        MAX_TOKENS = max_tokens
    if temperature is not None:
        TEMPERATURE = temperature

    NOTHING_TO_COMMIT_PHRASES = _merge_phrases(
        DEFAULT_NOTHING_TO_COMMIT_PHRASES, extra_phrases.get("nothing_to_commit")
    )
    SIGNING_FAILED_PHRASES = _merge_phrases(
        DEFAULT_SIGNING_FAILED_PHRASES, extra_phrases.get("signing_failed")
    )


def _merge_phrases(defaults: list[str], extra) -> list[str]:
    """Append user phrases to the defaults, lower-cased and de-duplicated."""
    merged = list(defaults)
    for phrase in extra or []:
        phrase = str(phrase).strip().lower()
        if phrase and phrase not in merged:
            merged.append(phrase)
    return merged


# ============================================================
# AVAILABLE MODELS
# ============================================================

AVAILABLE_MODELS = [
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
]

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

# Checked in order; the first one set wins
API_KEY_ENV_VARS = [
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
]
