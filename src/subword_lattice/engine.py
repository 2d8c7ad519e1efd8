"""Tokenization engine: the integration layer for subword-lattice.

Orchestrates one tokenization call:
    text → normalize → score tables → lattice → decoder (+ frame sink) → tokens.

The engine is a pure function of (text, algorithm, normalize flag,
vocabulary, config). Every call builds its own tables, lattice, cost table
and frame list; nothing is cached or shared between calls. Traced and
untraced calls run the same decoder code and differ only in the sink.
"""

from __future__ import annotations

import hashlib
import math
import time
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from subword_lattice.algorithms import Algorithm, PolicyRegistry
from subword_lattice.config import LatticeConfig, default_config, resolve_config
from subword_lattice.lattice.builder import LatticeBuilder
from subword_lattice.logging.logger import TokenizationLogger
from subword_lattice.logging.types import TokenizationRecord
from subword_lattice.normalization import normalize as normalize_text
from subword_lattice.tracing.replay import count_backtracks
from subword_lattice.tracing.sink import FrameRecorder, NullFrameSink
from subword_lattice.vocabulary.defaults import DEFAULT_VOCABULARY
from subword_lattice.vocabulary.scores import derive_scores

if TYPE_CHECKING:
    from subword_lattice.lattice.types import Edge, EdgeId, Lattice
    from subword_lattice.tracing.sink import FrameSink
    from subword_lattice.tracing.types import InspectionFrame
    from subword_lattice.vocabulary.types import Vocabulary


def _json_cost(value: float) -> float | None:
    """Map an unreached (infinite) cost to ``None`` so output stays valid JSON."""
    return value if math.isfinite(value) else None


def _config_hash(config: LatticeConfig) -> str:
    """Compute a short hash of the config for logging.

    Args:
        config: The configuration to hash.

    Returns:
        First 16 hex characters of the SHA-256 digest of the config dump.
    """
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


@dataclass(frozen=True, slots=True)
class TokenizerResult:
    """Outcome of one tokenization call.

    Attributes:
        lattice: The candidate lattice the path was selected from.
        selected_path: Edge ids of the selected path, in text order.
        tokens: Labels of the selected edges.
        cost: Summed score of the selected edges.
        complete: True if the path spans the whole text.
    """

    lattice: Lattice
    selected_path: tuple[EdgeId, ...]
    tokens: tuple[str, ...]
    cost: float
    complete: bool

    @property
    def text(self) -> str:
        """The lattice text (normalized if normalization was requested)."""
        return self.lattice.text

    @property
    def nodes(self) -> tuple[int, ...]:
        """Character-offset nodes of the lattice."""
        return self.lattice.nodes

    @property
    def selected_edges(self) -> list[Edge]:
        """Full Edge objects of the selected path."""
        return [self.lattice.edge(edge_id) for edge_id in self.selected_path]

    def to_dict(self, *, include_lattice: bool = False) -> dict[str, Any]:
        """JSON-ready view of the result."""
        out: dict[str, Any] = {
            "algorithm": self.lattice.algorithm.value,
            "text": self.text,
            "tokens": list(self.tokens),
            "selected_path": [list(edge_id) for edge_id in self.selected_path],
            "cost": _json_cost(self.cost),
            "complete": self.complete,
        }
        if include_lattice:
            out["nodes"] = list(self.nodes)
            out["edges"] = [
                {
                    "id": edge.display_id,
                    "from": edge.start,
                    "to": edge.end,
                    "label": edge.label,
                    "score": _json_cost(edge.score),
                    "fallback": edge.is_fallback,
                }
                for edge in self.lattice.edges
            ]
        return out


@dataclass(frozen=True, slots=True)
class TracedResult:
    """Tokenization outcome plus the inspection frames that produced it.

    Attributes:
        result: The same result an untraced call returns.
        frames: Inspection frames in emission order.
    """

    result: TokenizerResult
    frames: tuple[InspectionFrame, ...]

    @property
    def tokens(self) -> tuple[str, ...]:
        return self.result.tokens

    @property
    def backtrack_count(self) -> int:
        """Number of cost-improving update frames."""
        return count_backtracks(self.frames)

    def to_dict(self, *, include_lattice: bool = False) -> dict[str, Any]:
        """JSON-ready view including frames."""
        out = self.result.to_dict(include_lattice=include_lattice)
        frames = []
        for frame in self.frames:
            item = {**asdict(frame), "kind": frame.kind.value, "id": frame.frame_id}
            if frame.cost_table is not None:
                item["cost_table"] = [
                    {**asdict(cell), "cost": _json_cost(cell.cost)} for cell in frame.cost_table
                ]
            frames.append(item)
        out["frames"] = frames
        return out


class TokenizerEngine:
    """Builds lattices and selects token paths under a fixed configuration.

    The only state an engine keeps is its diagnostic logger; tokenization
    itself reads nothing from previous calls.
    """

    def __init__(self, config: LatticeConfig | None = None) -> None:
        """Initialize the engine and its collaborators.

        Args:
            config: Configuration to use. ``None`` loads the process-wide
                default from the environment.
        """
        self._config = config if config is not None else default_config()
        self._builder = LatticeBuilder(self._config)
        self._logger = TokenizationLogger(self._config)
        self._config_hash = _config_hash(self._config)

    @property
    def config(self) -> LatticeConfig:
        """The active configuration."""
        return self._config

    @property
    def tokenization_logger(self) -> TokenizationLogger:
        """The diagnostic logger for this engine."""
        return self._logger

    def tokenize(
        self,
        text: str,
        algorithm: Algorithm | str,
        normalize: bool = True,
        vocabulary: Vocabulary | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> TokenizerResult:
        """Segment *text* into tokens.

        Args:
            text: Raw input text.
            algorithm: Algorithm member or name.
            normalize: Apply lower-casing, accent stripping and trimming first.
            vocabulary: Ordered (token, score) entries; ``None`` uses the
                built-in demonstration vocabulary.
            overrides: Config fields to change for this call only, keys
                optionally prefixed with 'swl_'. Logging verbosity stays that
                of the engine.

        Returns:
            TokenizerResult with the lattice, selected path and tokens.

        Raises:
            UnknownAlgorithmError: If *algorithm* names no algorithm.
            ConfigValidationError: If *overrides* name an unknown field or
                fail validation.
        """
        return self._run(text, algorithm, normalize, vocabulary, overrides, NullFrameSink())

    def tokenize_with_trace(
        self,
        text: str,
        algorithm: Algorithm | str,
        normalize: bool = True,
        vocabulary: Vocabulary | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> TracedResult:
        """Segment *text* and record every decoding decision.

        Arguments are the same as for :meth:`tokenize`.

        Returns:
            TracedResult whose frames, replayed in order, reconstruct the
            selected path and tokens.
        """
        recorder = FrameRecorder()
        result = self._run(text, algorithm, normalize, vocabulary, overrides, recorder)
        return TracedResult(result=result, frames=recorder.frames)

    def _run(
        self,
        text: str,
        algorithm: Algorithm | str,
        normalize: bool,
        vocabulary: Vocabulary | None,
        overrides: dict[str, Any] | None,
        sink: FrameSink,
    ) -> TokenizerResult:
        t_start_ns = time.perf_counter_ns()

        config = resolve_config(self._config, overrides)
        if config is self._config:
            builder, config_hash = self._builder, self._config_hash
        else:
            builder, config_hash = LatticeBuilder(config), _config_hash(config)

        member = Algorithm.parse(algorithm)
        policy = PolicyRegistry.build(member, config)
        vocab = DEFAULT_VOCABULARY if vocabulary is None else vocabulary
        processed = normalize_text(text) if normalize else text

        # --- 1. Derive score tables ---
        tables = derive_scores(vocab)

        # --- 2. Build lattice ---
        lattice = builder.build(processed, member, vocab, tables=tables, policy=policy)

        # --- 3. Decode ---
        decoded = policy.build_decoder().decode(lattice, sink)

        result = TokenizerResult(
            lattice=lattice,
            selected_path=decoded.path,
            tokens=tuple(label for _, _, label in decoded.path),
            cost=decoded.cost,
            complete=decoded.complete,
        )

        # --- 4. Log record ---
        frames = sink.frames if isinstance(sink, FrameRecorder) else ()
        t_end_ns = time.perf_counter_ns()
        self._logger.log_call(
            TokenizationRecord(
                timestamp_ns=t_start_ns,
                elapsed_ms=(t_end_ns - t_start_ns) / 1_000_000.0,
                algorithm=member.value,
                normalized=normalize,
                text_length=len(processed),
                edge_count=len(lattice.edges),
                fallback_edge_count=sum(1 for edge in lattice.edges if edge.is_fallback),
                token_count=len(result.tokens),
                path_cost=result.cost,
                complete=result.complete,
                frame_count=len(frames),
                update_count=count_backtracks(frames),
                config_hash=config_hash,
            )
        )
        return result


def tokenize(
    text: str,
    algorithm: Algorithm | str,
    normalize: bool = True,
    vocabulary: Vocabulary | None = None,
    *,
    config: LatticeConfig | None = None,
    overrides: dict[str, Any] | None = None,
) -> TokenizerResult:
    """Segment *text* with a one-off engine. See :meth:`TokenizerEngine.tokenize`."""
    return TokenizerEngine(config).tokenize(text, algorithm, normalize, vocabulary, overrides)


def tokenize_with_trace(
    text: str,
    algorithm: Algorithm | str,
    normalize: bool = True,
    vocabulary: Vocabulary | None = None,
    *,
    config: LatticeConfig | None = None,
    overrides: dict[str, Any] | None = None,
) -> TracedResult:
    """Traced variant of :func:`tokenize`. See :meth:`TokenizerEngine.tokenize_with_trace`."""
    return TokenizerEngine(config).tokenize_with_trace(
        text, algorithm, normalize, vocabulary, overrides
    )
