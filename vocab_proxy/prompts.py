"""Prompt templates for the structured generation routes."""
from __future__ import annotations

from vocab_proxy.models import DEFINITION, QUIZ, VOCAB_LIST, GenerationRequest

VOCAB_SYSTEM = "You are an SAT tutor who picks challenging vocabulary words."
DEFINITION_SYSTEM = "You write short, accurate dictionary definitions for SAT students."
QUIZ_SYSTEM = "You create SAT vocabulary quiz questions."

VOCAB_LIST_PROMPT = """\
List {count} distinct SAT vocabulary words that a high-school student \
preparing for the exam should know. Prefer words that appear in real SAT \
reading passages over obscure ones.

Respond with a JSON array of lowercase strings only, with no other text:

["abate", "acrimony", "benevolent"]
"""

DEFINITION_PROMPT = """\
Define the SAT word "{word}" in one or two plain sentences a high-school \
student would understand.

Respond in this exact JSON format only, with no other text:
{{
  "word": "{word}",
  "definition": "A short, clear definition"
}}
"""

QUIZ_PROMPT = """\
Generate a multiple-choice question for the SAT word "{word}".
Include:
- a question sentence,
- four answer options labeled A, B, C, D,
- exactly one correct answer,
- specify the correct answer letter.

Format your response as JSON like this:

{{
  "question": "What is the best definition of 'abate'?",
  "options": {{
    "A": "To increase in intensity",
    "B": "To become less intense",
    "C": "To confuse or perplex",
    "D": "To support or encourage"
  }},
  "correctAnswer": "B"
}}
"""

# shape -> (system instruction, user template, temperature, max output tokens)
TEMPLATES = {
    VOCAB_LIST: (VOCAB_SYSTEM, VOCAB_LIST_PROMPT, 0.7, 400),
    DEFINITION: (DEFINITION_SYSTEM, DEFINITION_PROMPT, 0.3, 200),
    QUIZ: (QUIZ_SYSTEM, QUIZ_PROMPT, 0.3, 300),
}


def build_request(shape: str, word: str | None = None, count: int = 10) -> GenerationRequest:
    if shape not in TEMPLATES:
        raise ValueError(f"Unknown shape: {shape}")
    if shape != VOCAB_LIST and not word:
        raise ValueError(f"A word is required for the {shape} shape")
    system, template, temperature, max_tokens = TEMPLATES[shape]
    return GenerationRequest(
        system_instruction=system,
        user_prompt=template.format(word=word or "", count=count),
        temperature=temperature,
        max_output_tokens=max_tokens,
    )
