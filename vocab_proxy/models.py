from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

VOCAB_LIST = "vocab_list"
DEFINITION = "definition"
QUIZ = "quiz"

SHAPES = (VOCAB_LIST, DEFINITION, QUIZ)

QUIZ_KEYS = ("A", "B", "C", "D")

UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class GenerationRequest:
    system_instruction: str
    user_prompt: str
    temperature: float = 0.7
    max_output_tokens: int = 300

    def __post_init__(self):
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be in [0, 2] (got {self.temperature})")
        if isinstance(self.max_output_tokens, bool) or not isinstance(self.max_output_tokens, int):
            raise ValueError(f"max_output_tokens must be an int (got {self.max_output_tokens!r})")
        if self.max_output_tokens <= 0:
            raise ValueError(f"max_output_tokens must be positive (got {self.max_output_tokens})")

    def messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system_instruction},
            {"role": "user", "content": self.user_prompt},
        ]


@dataclass
class GenerationResult:
    raw_text: str


@dataclass
class VocabList:
    words: list[str]

    def to_dict(self) -> dict:
        return {"words": list(self.words)}


@dataclass
class Definition:
    word: str
    definition: str

    def to_dict(self) -> dict:
        return {"word": self.word, "definition": self.definition}


@dataclass
class Quiz:
    question: str
    options: dict[str, str]
    correct_answer: str  # one of QUIZ_KEYS

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": dict(self.options),
            "correctAnswer": self.correct_answer,
        }


Payload = Union[VocabList, Definition, Quiz]


@dataclass
class Success:
    payload: Payload


@dataclass
class Fallback:
    reason: str
    raw_text: str
    payload: Payload | None = field(default=None)


ExtractionOutcome = Union[Success, Fallback]
