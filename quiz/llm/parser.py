"""Extracao do JSON contido na resposta do modelo."""

import re

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json_text(content: str) -> str:
    """Extrai o objeto JSON de uma resposta de texto.

    Aceita:
    - JSON puro
    - JSON dentro de bloco markdown (```json ... ``` ou ``` ... ```)
    - JSON cercado de texto (da primeira { ate a ultima })

    Sem objeto reconhecivel, devolve o texto original e deixa o
    ``json.loads`` falhar com erro claro.
    """
    text = content.strip()

    if "```json" in text:
        text = text.split("```json", 1)[1].split("```", 1)[0].strip()
    elif "```" in text:
        text = text.split("```", 1)[1].split("```", 1)[0].strip()

    if not text.startswith("{"):
        match = _JSON_OBJECT.search(text)
        if match:
            text = match.group(0)

    return text
