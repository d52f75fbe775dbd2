"""PassMeter -- local password strength classification.

Classifies a password into one of seven verdicts using character-level
checks only: length, repeated and sequential runs, character variety and a
list of well-known bad fragments.  Nothing leaves the process.
"""

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# ── Verdicts ───────────────────────────────────────────────────────────────


class Verdict(enum.IntEnum):
    """Classification outcome.

    The integer values are stable: UI code indexes message lists with
    ``verdict - 1``.
    """

    STRONG = 1
    MEDIUM = 2
    WEAK_REPEATED_CHARACTERS = 3
    WEAK_SUBSEQUENT_CHARACTERS = 4
    WEAK_WELL_KNOWN = 5
    WEAK_TOO_SHORT = 6
    WEAK_TOO_FEW_UNIQUE_CHARACTERS = 7

    @property
    def accepted(self) -> bool:
        """Medium and strong passwords are acceptable."""
        return self <= Verdict.MEDIUM

    @property
    def bucket(self) -> str:
        """Meter style bucket: ``strong``, ``medium`` or ``weak``."""
        if self == Verdict.STRONG:
            return "strong"
        if self == Verdict.MEDIUM:
            return "medium"
        return "weak"


# ── Configuration ──────────────────────────────────────────────────────────

SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=~`[];':\"<>/?|\\")

DEFAULT_BAD_PATTERNS = (
    "password",
    "passw0rd",
    "p@ssw0rd",
    "qwerty",
    "azerty",
    "asdfgh",
    "zxcvbn",
    "1q2w3e",
    "letmein",
    "welcome",
    "admin",
    "login",
    "master",
    "secret",
    "monkey",
    "dragon",
    "shadow",
    "sunshine",
    "princess",
    "football",
    "baseball",
    "iloveyou",
    "trustno1",
    "superman",
    "batman",
    "starwars",
    "whatever",
    "freedom",
    "qazwsx",
    "111111",
    "123456",
    "654321",
)


@dataclass(frozen=True)
class ClassifierConfig:
    """Thresholds and pattern list used by :class:`PasswordClassifier`.

    Run thresholds count characters: with the default of 3, ``"aaa"`` and
    ``"abc"`` are runs, ``"aa"`` and ``"ab"`` are not.  Ratio thresholds are
    inclusive upper bounds.
    """

    min_length: int = 8
    same_run_threshold: int = 3
    increasing_run_threshold: int = 3
    decreasing_run_threshold: int = 3
    uniqueness_ratio_threshold: float = 0.3
    well_known_remainder_ratio_threshold: float = 0.4
    special_characters: frozenset = SPECIAL_CHARACTERS
    bad_patterns: tuple = DEFAULT_BAD_PATTERNS

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        for name in (
            "same_run_threshold",
            "increasing_run_threshold",
            "decreasing_run_threshold",
        ):
            if getattr(self, name) < 2:
                raise ValueError(f"{name} must be at least 2")
        for name in (
            "uniqueness_ratio_threshold",
            "well_known_remainder_ratio_threshold",
        ):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1")

        if isinstance(self.bad_patterns, str):
            raise ValueError("bad_patterns must be a sequence of strings, not a str")
        patterns = tuple(p.lower() for p in self.bad_patterns)
        if any(not p for p in patterns):
            raise ValueError("bad patterns must not be empty")
        # Frozen: bypass __setattr__ to store the normalised values.
        object.__setattr__(self, "bad_patterns", patterns)
        object.__setattr__(
            self, "special_characters", frozenset(self.special_characters),
        )


def load_bad_patterns(path) -> tuple:
    """Read bad patterns from *path*, one per line.

    Blank lines and ``#`` comments are skipped; patterns are lower-cased.
    """
    with open(path, encoding="utf-8") as f:
        patterns = tuple(
            line.strip().lower()
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        )
    logger.debug("Loaded %d bad patterns from %s", len(patterns), path)
    return patterns


# ── Classification ─────────────────────────────────────────────────────────


class PasswordClassifier:
    """Stateless password classifier bound to one :class:`ClassifierConfig`.

    Instances keep no state between calls and may be shared freely.
    """

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = ClassifierConfig() if config is None else config

    def classify(self, password: str | None) -> Verdict:
        """Return the :class:`Verdict` for *password*.

        Checks run in a fixed order and the first failing one decides:
        length, repeated/sequential runs (during a single scan), variety of
        characters, well-known patterns, and finally the character-class mix
        that separates STRONG from MEDIUM.
        """
        cfg = self.config

        if not password or len(password) < cfg.min_length:
            return Verdict.WEAK_TOO_SHORT

        has_upper = has_lower = has_digit = has_special = False
        histogram: dict[str, int] = {}
        same = increasing = decreasing = 1
        previous = None

        for char in password:
            if not has_upper and char != char.lower():
                has_upper = True
            if not has_lower and char != char.upper():
                has_lower = True
            if not has_digit and "0" <= char <= "9":
                has_digit = True
            if not has_special and char in cfg.special_characters:
                has_special = True

            code = ord(char)
            if previous is not None and code == previous:
                same += 1
                if same >= cfg.same_run_threshold:
                    return Verdict.WEAK_REPEATED_CHARACTERS
            else:
                same = 1
            if previous is not None and code == previous + 1:
                increasing += 1
                if increasing >= cfg.increasing_run_threshold:
                    return Verdict.WEAK_SUBSEQUENT_CHARACTERS
            else:
                increasing = 1
            if previous is not None and code == previous - 1:
                decreasing += 1
                if decreasing >= cfg.decreasing_run_threshold:
                    return Verdict.WEAK_SUBSEQUENT_CHARACTERS
            else:
                decreasing = 1

            histogram[char] = histogram.get(char, 0) + 1
            previous = code

        if len(histogram) / len(password) <= cfg.uniqueness_ratio_threshold:
            return Verdict.WEAK_TOO_FEW_UNIQUE_CHARACTERS

        if self._is_well_known(password):
            return Verdict.WEAK_WELL_KNOWN

        if has_upper and has_lower and (has_special or has_digit):
            return Verdict.STRONG
        return Verdict.MEDIUM

    def _is_well_known(self, password: str) -> bool:
        lower = password.lower()
        reversed_lower = lower[::-1]
        threshold = self.config.well_known_remainder_ratio_threshold

        for pattern in self.config.bad_patterns:
            if pattern in lower:
                remainder = lower.replace(pattern, "")
            elif pattern in reversed_lower:
                remainder = reversed_lower.replace(pattern, "")
            else:
                continue
            if len(remainder) / len(password) <= threshold:
                return True
        return False


_default_classifier = PasswordClassifier()


def classify(password: str | None, config: ClassifierConfig | None = None) -> Verdict:
    """Classify *password* with *config*, or with the default thresholds."""
    if config is None:
        return _default_classifier.classify(password)
    return PasswordClassifier(config).classify(password)


# ── Meter helpers ──────────────────────────────────────────────────────────


def meter_message(verdict: Verdict, messages) -> str:
    """Pick the caller-supplied message for *verdict* (indexed ``verdict - 1``)."""
    index = int(verdict) - 1
    if index < len(messages) and messages[index]:
        return messages[index]
    return f"?No translation for verdict: {int(verdict)}"


def passwords_match(password: str, repeat: str) -> bool:
    """True when the confirmation field is filled in and equals *password*."""
    return bool(repeat) and password == repeat
