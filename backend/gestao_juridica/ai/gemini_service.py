"""
Serviço de integração com Gemini para as funcionalidades de texto.

Responsável por:
- Rascunho de petições a partir da tese jurídica do advogado
- Simulação do próximo andamento processual
- Resumo de peças jurídicas

Cada chamada é uma requisição única com resposta JSON validada contra o
schema de saída. Sem retentativas, sem streaming e sem cache de resultados.
"""

from typing import Any, Callable, TypeVar

import structlog
from google import genai
from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from gestao_juridica.core.config import Settings
from gestao_juridica.core.exceptions import AIServiceError
from gestao_juridica.schemas.base import BaseSchema
from gestao_juridica.schemas.ia import (
    AndamentoInput,
    AndamentoOutput,
    PeticaoInput,
    PeticaoOutput,
    ResumoInput,
    ResumoOutput,
)

logger = structlog.get_logger()

OutputType = TypeVar("OutputType", bound=BaseSchema)

ClientFactory = Callable[[str], genai.Client]


PETITION_PROMPT = """Você é um advogado assistente sênior altamente competente. Sua tarefa é elaborar o rascunho de uma petição com base nas diretrizes estratégicas fornecidas pelo advogado responsável.

Sua prioridade máxima é seguir a TESE JURÍDICA definida. Todos os argumentos, fatos e pedidos devem ser construídos para apoiar e provar essa tese. Não desvie da estratégia definida.

Diretrizes para a Petição:

1. **Tipo de Petição**: {petition_type}
2. **Tese Jurídica Central (Guia Mestre)**: {legal_thesis}
3. **Fatos do Caso**: Utilize estes fatos para construir a narrativa.
   {case_facts}
4. **Tom e Estilo**: Siga estritamente estas instruções de tom e estilo.
   {tone_and_style}
5. **Partes**:
   - Cliente: {client_info}
   - Parte Contrária: {opponent_info}

Estruture a petição de forma lógica, com endereçamento, qualificação das partes, exposição dos fatos, fundamentação jurídica (alinhada à tese) e pedidos. Use uma linguagem técnica e persuasiva.

Responda APENAS com um JSON no formato {{"draftContent": "<rascunho completo da petição>"}}."""

STATUS_PROMPT = """Você é um sistema simulador de tribunal de justiça. Sua tarefa é gerar o próximo andamento processual *realista* para um processo judicial, com base nas informações fornecidas.

Processo: {process_number}
Tribunal: {court}
Status Atual: {current_status}
Último Andamento: "{last_update}"

Gere o próximo andamento que faria sentido no fluxo de um processo judicial. A data deve ser um ou dois dias após a data atual. A descrição deve ser curta e técnica, e os detalhes devem ser um texto típico de publicações oficiais.

Seja criativo e tecnicamente preciso dentro do jargão jurídico brasileiro. Não repita o último andamento. Crie uma progressão lógica. Por exemplo, se o último andamento foi uma "Conclusão para Despacho", o próximo poderia ser um "Despacho de Mero Expediente". Se foi uma "Juntada de Petição", o próximo pode ser uma "Conclusão para Decisão".

Responda APENAS com um JSON com os campos "date" (ISO 8601), "description" e "details"."""

SUMMARY_PROMPT = """You are an AI assistant for paralegals to generate legal summaries.

Summarize the following legal document, tailoring the response to the specified tone and focusing on the areas specified.
Make sure to include all relevant information, such as names of parties involved, dates and locations, and specific articles cited.

Document Text: {document_text}
Tone: {tone}
Focus Areas: {focus_areas}

Respond ONLY with a JSON object {{"summary": "<the summary>"}}."""


def _object_schema(*fields: str) -> types.Schema:
    """Schema JSON de objeto com campos string obrigatórios."""
    return types.Schema(
        type=types.Type.OBJECT,
        properties={name: types.Schema(type=types.Type.STRING) for name in fields},
        required=list(fields),
    )


PETITION_SCHEMA = _object_schema("draftContent")
STATUS_SCHEMA = _object_schema("date", "description", "details")
SUMMARY_SCHEMA = _object_schema("summary")


class GeminiService:
    """
    Adaptadores das funcionalidades de IA sobre um cliente Gemini.

    Uso:
        service = registry.service_for(escritorio.google_api_key)
        rascunho = await service.draft_petition(dados)
    """

    def __init__(self, client: genai.Client, model_name: str, temperature: float = 0.4):
        self._client = client
        self._model_name = model_name
        self._temperature = temperature

    async def _generate(
        self,
        operation: str,
        prompt: str,
        schema: types.Schema,
        output_model: type[OutputType],
    ) -> OutputType:
        config = types.GenerateContentConfig(
            temperature=self._temperature,
            response_mime_type="application/json",
            response_schema=schema,
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            logger.error("Erro na chamada ao Gemini", operation=operation, exc_type=type(e).__name__)
            raise AIServiceError()

        text = (response.text or "").strip()
        if not text:
            logger.error("Resposta vazia do Gemini", operation=operation)
            raise AIServiceError()

        try:
            result = output_model.model_validate_json(text)
        except PydanticValidationError as e:
            logger.error(
                "Resposta da IA fora do schema",
                operation=operation,
                errors=e.error_count(),
            )
            raise AIServiceError()

        logger.info("Conteúdo gerado pela IA", operation=operation, model=self._model_name)
        return result

    async def draft_petition(self, data: PeticaoInput) -> PeticaoOutput:
        """Gera rascunho de petição alinhado à tese jurídica informada."""
        prompt = PETITION_PROMPT.format(**data.model_dump())
        return await self._generate("draft_petition", prompt, PETITION_SCHEMA, PeticaoOutput)

    async def simulate_status_update(self, data: AndamentoInput) -> AndamentoOutput:
        """Gera o próximo andamento plausível de um processo."""
        prompt = STATUS_PROMPT.format(**data.model_dump())
        return await self._generate("simulate_status_update", prompt, STATUS_SCHEMA, AndamentoOutput)

    async def summarize_brief(self, data: ResumoInput) -> ResumoOutput:
        """Resume uma peça jurídica no tom e foco pedidos."""
        prompt = SUMMARY_PROMPT.format(**data.model_dump())
        return await self._generate("summarize_brief", prompt, SUMMARY_SCHEMA, ResumoOutput)


def _default_client_factory(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


class GeminiClientRegistry:
    """
    Clientes Gemini por chave de API.

    Cada escritório usa a própria chave; o cliente de uma chave é criado na
    primeira chamada e reaproveitado depois. Criado uma única vez na
    inicialização da aplicação.
    """

    def __init__(self, settings: Settings, client_factory: ClientFactory | None = None):
        self._settings = settings
        self._factory = client_factory or _default_client_factory
        self._clients: dict[str, Any] = {}

    def client_for(self, api_key: str) -> genai.Client:
        if not api_key:
            raise ValueError("api_key vazia")
        client = self._clients.get(api_key)
        if client is None:
            client = self._factory(api_key)
            self._clients[api_key] = client
            logger.info("Cliente Gemini criado", clientes=len(self._clients))
        return client

    def service_for(self, api_key: str) -> GeminiService:
        return GeminiService(
            self.client_for(api_key),
            model_name=self._settings.GEMINI_MODEL,
            temperature=self._settings.GEMINI_TEMPERATURE,
        )

    def forget(self, api_key: str) -> None:
        """Descarta o cliente de uma chave substituída."""
        self._clients.pop(api_key, None)

    def __len__(self) -> int:
        return len(self._clients)
