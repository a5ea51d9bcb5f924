#!/usr/bin/env python3
"""
Script de geracao de quiz a partir de notas de aula.

Uso:
    python scripts/generate_quiz.py <arquivo>
    python scripts/generate_quiz.py <arquivo> --questions 10 --difficulty hard
    python scripts/generate_quiz.py <arquivo> --types MCQ TrueFalse --level 300
    python scripts/generate_quiz.py --list
    python scripts/generate_quiz.py --delete <quiz_id>

O quiz gerado e gravado no store local (QUIZ_DATA_DIR).
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Adicionar o diretorio pai ao path
sys.path.insert(0, str(Path(__file__).parent.parent))

from quiz.config import QuizConfig
from quiz.errors import QuizError
from quiz.models.enums import CourseLevel, Difficulty, QuestionType
from quiz.models.schemas import GenerateQuizRequest
from quiz.shell import build_shell


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gera quizzes a partir de notas de aula")
    parser.add_argument("lecture", nargs="?", type=Path, help="Arquivo de texto com a aula")
    parser.add_argument("--questions", "-n", type=int, default=5, help="Numero de questoes (1-20)")
    parser.add_argument(
        "--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.MEDIUM.value
    )
    parser.add_argument(
        "--types",
        nargs="+",
        choices=[t.value for t in QuestionType],
        default=[QuestionType.MCQ.value],
    )
    parser.add_argument(
        "--level", choices=[c.value for c in CourseLevel], default=CourseLevel.LEVEL_200.value
    )
    parser.add_argument("--list", action="store_true", help="Lista quizzes salvos")
    parser.add_argument("--delete", metavar="QUIZ_ID", help="Remove um quiz salvo")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    config = QuizConfig.from_env()
    shell = build_shell(config)
    await shell.startup()

    if shell.store.warning:
        print(f"[WARN] {shell.store.warning}")

    if args.list:
        quizzes = shell.list_quizzes()
        if not quizzes:
            print("Nenhum quiz salvo.")
        for quiz in quizzes:
            print(
                f"{quiz.id}  {quiz.title}  ({quiz.course_level.label}, {quiz.difficulty.value}, "
                f"{quiz.total_questions} questoes)"
            )
        return 0

    if args.delete:
        shell.switch_role("ADMIN")
        try:
            await shell.delete_quiz(args.delete)
        except QuizError as e:
            print(f"[ERRO] {e.message}")
            return 1
        print(f"Quiz removido: {args.delete}")
        return 0

    if args.lecture is None:
        print("[ERRO] Informe o arquivo da aula (ou use --list).")
        return 2

    try:
        lecture_text = args.lecture.read_text(encoding="utf-8")
    except OSError as e:
        print(f"[ERRO] Nao foi possivel ler {args.lecture}: {e}")
        return 1

    request = GenerateQuizRequest(
        lecture_text=lecture_text,
        num_questions=args.questions,
        difficulty=Difficulty(args.difficulty),
        question_types=[QuestionType(t) for t in args.types],
        course_level=CourseLevel(args.level),
    )

    shell.switch_role("ADMIN")
    try:
        quiz = await shell.create_quiz(request)
    except QuizError as e:
        print(f"[ERRO] {e.message}")
        if e.retryable:
            print("Falha temporaria, tente novamente.")
        return 1

    print(f"Quiz gerado: {quiz.id}  {quiz.title}  ({quiz.total_questions} questoes)")
    if shell.store.last_persist_error:
        print(f"[WARN] {shell.store.last_persist_error}")
    return 0


def main() -> None:
    args = parse_args()
    if not 1 <= args.questions <= 20:
        print("[ERRO] --questions deve estar entre 1 e 20")
        sys.exit(2)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
