# src/transcript_kit/summarization/summarizer.py

import asyncio
import logging
from time import monotonic

from transcript_kit.chunking import chunk_text, estimate_tokens, should_use_map_reduce
from transcript_kit.llms.base import LLMClient, LLMResponse, Message, Usage
from transcript_kit.observability import names
from transcript_kit.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    elapsed_ms,
)
from transcript_kit.parsers.markdown_parser import MarkdownParser
from transcript_kit.parsers.summary_parser import SummaryParser
from transcript_kit.prompts import PromptsLibrary

from .config import CONTENT_GUIDANCE, SummarizationConfig, language_name
from .models import Strategy, SummaryResult

logger = logging.getLogger(__name__)


class TranscriptSummarizer:
    """Summarizes transcripts, switching to map-reduce for long inputs.

    Short transcripts go to the model in one request. Transcripts longer
    than ``config.map_reduce_threshold`` are split at sentence boundaries,
    each chunk is condensed on its own (map), and the partial notes are
    merged by a final request (reduce). The final markdown is parsed into
    sections and blocks before it is returned.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        prompts: PromptsLibrary | None = None,
        config: SummarizationConfig = SummarizationConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.llm_client = llm_client
        self.prompts = prompts or PromptsLibrary.default()
        self.config = config
        self.metrics_hook = metrics_hook
        self._summary_parser = SummaryParser(metrics_hook=metrics_hook)
        self._markdown_parser = MarkdownParser(metrics_hook=metrics_hook)

    async def summarize(self, transcript: str) -> SummaryResult:
        self._validate(transcript)
        start = monotonic()

        strategy: Strategy = "direct"
        chunks = [transcript]
        if should_use_map_reduce(transcript, self.config.map_reduce_threshold):
            chunks = chunk_text(
                transcript, self.config.chunk_size, metrics_hook=self.metrics_hook
            )
            if len(chunks) > 1:
                strategy = "map_reduce"
            else:
                logger.warning(
                    "Transcript of %d chars has no sentence boundary to split on, "
                    "summarizing in one request",
                    len(transcript),
                )
                chunks = [transcript]

        labels = {"strategy": strategy, "content_type": self.config.content_type}
        logger.info(
            "Summarizing transcript: chars=%d, est_tokens=%d, strategy=%s, chunks=%d",
            len(transcript),
            estimate_tokens(transcript),
            strategy,
            len(chunks),
        )

        try:
            if strategy == "map_reduce":
                response, usage = await self._map_reduce(chunks)
            else:
                response = await self._direct(transcript)
                usage = response.usage
        except Exception:
            self.metrics_hook.increment(names.SUMMARIZATION_ERRORS_TOTAL, labels=labels)
            logger.error("Summarization failed: strategy=%s", strategy)
            raise

        markdown = response.text.strip()
        if response.finish_reason != "stop":
            logger.warning("Summary finished with reason=%s", response.finish_reason)

        self.metrics_hook.record_latency(
            names.SUMMARIZATION_DURATION, elapsed_ms(start), labels=labels
        )
        self.metrics_hook.increment(names.SUMMARIZATION_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.record_gauge(names.SUMMARIZATION_CHUNK_COUNT, len(chunks))

        return SummaryResult(
            markdown=markdown,
            sections=self._summary_parser.parse(markdown),
            blocks=self._markdown_parser.parse(markdown),
            strategy=strategy,
            chunk_count=len(chunks),
            usage=usage,
        )

    def _validate(self, transcript: str) -> None:
        if not transcript or not transcript.strip():
            raise ValueError("Transcript is required")
        if len(transcript) < self.config.min_transcript_length:
            raise ValueError(
                "Transcript too short. Minimum "
                f"{self.config.min_transcript_length} characters required"
            )
        if len(transcript) > self.config.max_transcript_length:
            raise ValueError(
                "Transcript too long. Maximum "
                f"{self.config.max_transcript_length} characters allowed"
            )

    async def _direct(self, transcript: str) -> LLMResponse:
        user = self.prompts.get("summarize_transcript").render(transcript=transcript)
        return await self._complete([self._system_message(), Message.user(user)])

    async def _map_reduce(self, chunks: list[str]) -> tuple[LLMResponse, Usage]:
        map_prompt = self.prompts.get("map_chunk")
        semaphore = asyncio.Semaphore(self.config.max_concurrency)

        async def summarize_chunk(index: int, chunk: str) -> LLMResponse:
            prompt = map_prompt.render(
                chunk=chunk,
                chunk_index=index,
                chunk_count=len(chunks),
                content_type=self.config.content_type,
            )
            async with semaphore:
                logger.debug("Map step %d/%d: chars=%d", index, len(chunks), len(chunk))
                return await self._complete([Message.user(prompt)])

        # gather keeps results in chunk order
        partials = await asyncio.gather(
            *(summarize_chunk(i, c) for i, c in enumerate(chunks, start=1))
        )

        notes = "\n\n".join(
            f"### Part {i}\n\n{partial.text.strip()}"
            for i, partial in enumerate(partials, start=1)
        )
        reduce_prompt = self.prompts.get("reduce_summaries").render(
            partial_summaries=notes, chunk_count=len(chunks)
        )
        logger.debug("Reduce step: %d partial summaries, chars=%d", len(partials), len(notes))
        final = await self._complete([self._system_message(), Message.user(reduce_prompt)])

        usage = sum((p.usage for p in partials), Usage()) + final.usage
        return final, usage

    async def _complete(self, messages: list[Message]) -> LLMResponse:
        return await self.llm_client.complete(
            messages=messages,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    def _system_message(self) -> Message:
        content_type = self.config.content_type
        system = self.prompts.get("summarize_system").render(
            content_type=content_type.replace("-", " "),
            guidance=CONTENT_GUIDANCE.get(content_type, ""),
            language=language_name(self.config.language),
        )
        return Message.system(system)
