"""Quiz Templates - Prompts e constantes para geracao de questoes."""

# =============================================================================
# SENTINELA
# =============================================================================

# Valor reservado em quiz_title quando o material e insuficiente
INSUFFICIENT_MATERIAL_SENTINEL = "INSUFFICIENT MATERIAL TO GENERATE QUALITY QUESTIONS"

DEFAULT_QUIZ_TITLE = "Untitled Quiz"

DEFAULT_TRUE_FALSE_OPTIONS = ["True", "False"]

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

QUIZ_SYSTEM_PROMPT = """You are a high-level university assessment generator.
Your task is to generate quiz questions STRICTLY from the lecture material provided.
- Do NOT introduce external knowledge.
- Do NOT rephrase content beyond what is necessary for clarity.
- Every question MUST be answerable directly from the lecture note.
- If content is insufficient, return a message saying "{sentinel}" in the quiz_title.
- Use clear academic language suited for the specified course level ({course_level}).
- Respond ONLY with valid JSON, without any additional text."""

# =============================================================================
# PROMPT TEMPLATE
# =============================================================================

QUIZ_GENERATION_PROMPT = """Analyze this lecture note and generate exactly {num_questions} questions.
Difficulty Level: {difficulty}
Allowed Question Types: {question_types}
Course Level: {course_level}

RULES:
1. "type" must be one of: {question_types}
2. For MCQ and TrueFalse questions, "correct_answer" must be copied exactly from "options"
3. TrueFalse questions use the options ["True", "False"]
4. ShortAnswer questions use an empty "options" list
5. "explanation" must cite the part of the lecture that supports the answer

Lecture Note:
\"\"\"
{lecture_text}
\"\"\"

OUTPUT FORMAT (JSON):
{{
  "quiz_title": "Short descriptive title",
  "questions": [
    {{
      "question": "...",
      "type": "MCQ",
      "options": ["...", "...", "...", "..."],
      "correct_answer": "...",
      "explanation": "..."
    }}
  ]
}}

Generate the complete JSON now:"""


def build_system_prompt(course_level: str) -> str:
    """Instrucao de sistema com o nivel do curso."""
    return QUIZ_SYSTEM_PROMPT.format(
        sentinel=INSUFFICIENT_MATERIAL_SENTINEL,
        course_level=course_level,
    )


def build_generation_prompt(
    lecture_text: str,
    num_questions: int,
    difficulty: str,
    question_types: list[str],
    course_level: str,
) -> str:
    """Prompt do usuario com a aula e os parametros da geracao."""
    return QUIZ_GENERATION_PROMPT.format(
        num_questions=num_questions,
        difficulty=difficulty,
        question_types=", ".join(question_types),
        course_level=course_level,
        lecture_text=lecture_text,
    )
