"""mockgen - LLM-generated mock tests for competitive exams.

Generates batches of multiple-choice questions for an exam across a list
of topics, fanning out requests to a chat-completion model, parsing its
free-form output, removing duplicates and topping up until the requested
count is reached.

Quick Start (LiteLLM + Local Storage):
    from mockgen import MockGen, LiteLLMProvider, LocalStorage

    mg = MockGen(
        provider=LiteLLMProvider(llm="perplexity/sonar-reasoning"),
        storage=LocalStorage("./mockgen_data"),
    )

    session, result = mg.create_session(
        exam_type="SSC CGL",
        topics=["Algebra", "Geometry"],
        num_questions=20,
        difficulty="hard",
    )
    score = mg.submit(session.id, {q.id: "A" for q in mg.get_questions(session.id)})

Generation only:
    from mockgen import ClientQuestionGenerator, GenerationRequest
    from mockgen.providers.litellm import LiteLLMClient

    generator = ClientQuestionGenerator(LiteLLMClient(model="groq/llama-3.3-70b-versatile"))
    result = generator.generate(GenerationRequest(exam_type="UPSC", topics=["Polity"]))
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("mockgen")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

# Configuration objects
from mockgen.configuration import (
    LiteLLMProvider,
    LocalStorage,
    ProviderConfig,
    StorageConfig,
)

# Central configuration
from mockgen.mockgen import MockGen

# Models
from mockgen.models import (
    AnswerRecord,
    Batch,
    GenerationRequest,
    GenerationResult,
    QuestionCandidate,
    SessionScore,
    StoredQuestion,
    TestSession,
)

# Provider ABCs
from mockgen.providers import LLMClient

# Question generation
from mockgen.question_generator import (
    BatchFetchError,
    ClientQuestionGenerator,
    GenerationError,
    InvalidRequestError,
    QuestionGenerator,
)
from mockgen.scoring import score_answers

# Configuration
from mockgen.settings import Settings

# Storage
from mockgen.stores import SessionStore, SQLiteSessionStore

__all__ = [
    # Version
    "__version__",
    # Models
    "AnswerRecord",
    "Batch",
    "GenerationRequest",
    "GenerationResult",
    "QuestionCandidate",
    "SessionScore",
    "StoredQuestion",
    "TestSession",
    # Config
    "Settings",
    # Configuration objects
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    # Storage
    "SessionStore",
    "SQLiteSessionStore",
    # Question generation
    "QuestionGenerator",
    "ClientQuestionGenerator",
    "GenerationError",
    "BatchFetchError",
    "InvalidRequestError",
    "score_answers",
    # Provider ABCs
    "LLMClient",
    # Central configuration
    "MockGen",
]
