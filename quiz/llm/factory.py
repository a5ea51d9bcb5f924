"""LLM Client Factory - Abstração para criação do cliente do Claude Agent SDK."""

import dataclasses
import logging
from typing import Protocol

from claude_agent_sdk import AssistantMessage, ClaudeAgentOptions, TextBlock, query

from ..prompts import build_system_prompt

logger = logging.getLogger(__name__)


class QuizLLM(Protocol):
    """Serviço de geração opaco: recebe instruções e devolve texto."""

    async def complete(self, system_prompt: str, prompt: str) -> str: ...


class ClaudeQuizLLM:
    """Implementação de ``QuizLLM`` sobre ``claude_agent_sdk.query``.

    Uma única rodada, sem ferramentas. O texto de todos os ``TextBlock``
    das mensagens do assistente é concatenado.
    """

    def __init__(self, options: ClaudeAgentOptions):
        self.options = options

    async def complete(self, system_prompt: str, prompt: str) -> str:
        options = dataclasses.replace(self.options, system_prompt=system_prompt)

        text = ""
        async for message in query(prompt=prompt, options=options):
            if isinstance(message, AssistantMessage):
                for block in message.content:
                    if isinstance(block, TextBlock):
                        text += block.text

        logger.debug(f"Resposta do Claude recebida: {len(text)} caracteres")
        return text


class LLMClientFactory:
    """Factory para criar o cliente LLM do gerador de quiz.

    Centraliza a configuração do Claude Agent SDK:
    - Modelo (HAIKU por padrão, rápido e econômico)
    - Uma rodada, sem ferramentas (apenas geração de JSON)

    Example:
        >>> llm = LLMClientFactory.create_llm("haiku")
        >>> text = await llm.complete(system_prompt, prompt)
    """

    DEFAULT_MODEL = "haiku"

    @staticmethod
    def create_options(model: str = DEFAULT_MODEL, system_prompt: str | None = None) -> ClaudeAgentOptions:
        """Cria ClaudeAgentOptions para geração de quiz.

        Args:
            model: Modelo Claude a usar (haiku, sonnet, opus)
            system_prompt: Prompt de sistema (padrão: nível 200)

        Returns:
            ClaudeAgentOptions configurado
        """
        return ClaudeAgentOptions(
            model=model,
            system_prompt=system_prompt or build_system_prompt("200"),
            max_turns=1,
            allowed_tools=[],
        )

    @classmethod
    def create_llm(cls, model: str | None = None) -> ClaudeQuizLLM:
        """Cria o cliente LLM padrão."""
        return ClaudeQuizLLM(cls.create_options(model or cls.DEFAULT_MODEL))
