"""All prompt templates — single source of truth for LLM instructions.

Every string that becomes part of a ``system`` message lives here.
No module in the project should hard-code prompt text.
"""

from enum import Enum


class Intent(str, Enum):
    """Named behaviour modes.  Each one selects a system-prompt clause."""

    ASK = "ask"
    JUST_ANSWER = "justanswer"
    ELI5 = "eli5"
    EXPLAIN = "explain"
    SUMMARIZE = "summarize"
    EVALUATE = "evaluate"
    TRUE_OR_FALSE = "trueorfalse"
    YES_OR_NO = "yesorno"


# ═══════════════════════════════════════════════════════════════════════════
#  FRAME
# ═══════════════════════════════════════════════════════════════════════════

# No trailing space: the format clause is glued straight on, as it always was.
PREAMBLE = (
    "You are designed to provide one-time responses. "
    "Always give a clear conclusion and avoid answering with questions."
)

NO_FORMAT_CLAUSE = "Do not use any formatting such as LaTeX, Markdown, or HTML. "

LANGUAGE_SUFFIX = (
    "Respond in the language of the user's prompt, or as specified by the user: "
)

# ═══════════════════════════════════════════════════════════════════════════
#  INTENT CLAUSES
# ═══════════════════════════════════════════════════════════════════════════

# Keep these uncapitalized in spirit: they are appended mid-paragraph.
ASK_CLAUSE = "Answer the user's question. "
JUST_ANSWER_CLAUSE = "Answer the user's prompt, without any additional explanation. "
ELI5_CLAUSE = "Explain Like I'm 5. "
EXPLAIN_CLAUSE = "Explain the user's prompt. "
SUMMARIZE_CLAUSE = "Summarize the user's prompt. "
EVALUATE_CLAUSE = "Evaluate the user's prompt. "
TRUE_OR_FALSE_CLAUSE = (
    "Answer the user's prompt with True or False. "
    "No matter the prompt, always respond with a True or False answer. "
)

# An intent may contribute more than one clause; they are joined in order.
#
# KNOWN QUIRK: JUST_ANSWER also carries the ELI5 clause.  Deployed prompts
# have always read this way, so the observable wording is kept until the
# owners decide to drop it.  See test_just_answer_includes_eli5_clause.
INTENT_CLAUSES: dict[Intent, tuple[str, ...]] = {
    Intent.ASK: (ASK_CLAUSE,),
    Intent.JUST_ANSWER: (JUST_ANSWER_CLAUSE, ELI5_CLAUSE),
    Intent.ELI5: (ELI5_CLAUSE,),
    Intent.EXPLAIN: (EXPLAIN_CLAUSE,),
    Intent.SUMMARIZE: (SUMMARIZE_CLAUSE,),
    Intent.EVALUATE: (EVALUATE_CLAUSE,),
    Intent.TRUE_OR_FALSE: (TRUE_OR_FALSE_CLAUSE,),
    Intent.YES_OR_NO: (TRUE_OR_FALSE_CLAUSE,),
}
