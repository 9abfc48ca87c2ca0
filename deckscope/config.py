from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKSCOPE_")

    # Neighbours scoring at or below this are dropped from similarity results
    similarity_threshold: float = 0.3

    # Default number of similar decks returned by find_similar_decks
    similar_deck_limit: int = 10

    # Neighbour pool consulted when aggregating card recommendations
    neighbor_pool_size: int = 20

    # Budget tier used when the caller does not pick one
    default_budget_tier: str = "moderate"


settings = Settings()


# =============================================================================
# FORMAT CONSTANTS
# =============================================================================

# Total deck size, commander included
DECK_SIZE = 100

# Deck size thresholds for confidence labels
HIGH_CONFIDENCE_DECK_SIZE = 70
MEDIUM_CONFIDENCE_DECK_SIZE = 40


# =============================================================================
# SIMILARITY WEIGHTS (sum to 1.0)
# =============================================================================

COLOR_IDENTITY_WEIGHT = 0.25
AVERAGE_CMC_WEIGHT = 0.15
CARD_TYPE_WEIGHT = 0.20
THEME_WEIGHT = 0.25
SHARED_CARD_WEIGHT = 0.15

# Difference in average CMC at which CMC closeness reaches zero
CMC_CLOSENESS_SPAN = 5.0

# Maximum source decks attached to one recommendation
MAX_SOURCE_DECKS = 3
