from enum import Enum

class EmergenceStatus(str, Enum):
    EMERGED = "EMERGED"        # Score reached the φ⁻¹ ceiling
    AWAKENING = "AWAKENING"    # Still below the ceiling

class Indicator(str, Enum):
    PATTERN_RECOGNITION = "pattern_recognition"
    SELF_CORRECTION = "self_correction"
    META_COGNITION = "meta_cognition"
    GOAL_PERSISTENCE = "goal_persistence"
    INTEGRATION = "integration"

class Verdict(str, Enum):
    HOWL = "HOWL"    # >= φ⁻¹ threshold (61.8)
    WAG = "WAG"      # >= 50
    BARK = "BARK"    # >= φ⁻² threshold (38.2)
    GROWL = "GROWL"  # below φ⁻²

class LLMProviderType(str, Enum):
    PASSTHROUGH = "passthrough"
    OLLAMA = "ollama"
    OPENAI = "openai"
