"""
Dependency injection container.

Builds every collaborator handle once at startup (cache client, database
engine, language model client, optional vector index) and exposes
per-request FastAPI dependencies that read them from app state.

Dependencies: fastapi, tos_checker.configs, tos_checker.application, tos_checker.boundary
System role: DI container for service injection
"""

import logging
from dataclasses import dataclass, field

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tos_checker.application.services import AnalysisService, CacheService
from tos_checker.boundary.cache.redis_cache import RedisKVCache, create_redis_client
from tos_checker.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tos_checker.boundary.llm.chat_client import (
    LangChainChatClient,
    LanguageModelClient,
    google_chat_model_factory,
)
from tos_checker.boundary.vdb.context_store import VectorContextStore
from tos_checker.boundary.vdb.embeddings import create_embeddings
from tos_checker.boundary.vdb.qdrant_index import QdrantVectorIndex, create_qdrant_client
from tos_checker.configs import Settings
from tos_checker.core.analysis import (
    AnalysisPipeline,
    ChunkAnalyzer,
    FanOutCoordinator,
    Summarizer,
)

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Collaborator handles shared by all requests."""

    settings: Settings
    cache: RedisKVCache
    pipeline: AnalysisPipeline
    engine: AsyncEngine | None = None
    session_factory: async_sessionmaker[AsyncSession] | None = None
    vector_index: QdrantVectorIndex | None = field(default=None)

    async def aclose(self) -> None:
        """Release network resources."""
        await self.cache.close()
        if self.vector_index is not None:
            await self.vector_index.close()
        if self.engine is not None:
            await self.engine.dispose()


def build_analysis_pipeline(
    settings: Settings,
    llm: LanguageModelClient,
    context_store: VectorContextStore | None = None,
) -> AnalysisPipeline:
    """
    Assemble the analysis pipeline from settings.

    Args:
        settings: Application settings
        llm: Language model client shared by both stages
        context_store: Optional vector enrichment

    Returns:
        AnalysisPipeline: Ready pipeline
    """
    analysis = settings.analysis
    analyzer = ChunkAnalyzer(
        llm=llm,
        model_name=settings.llm.analysis_model,
        timeout_seconds=analysis.chunk_timeout_seconds,
    )
    fan_out = FanOutCoordinator(
        analyzer=analyzer,
        max_concurrency=analysis.max_concurrency,
        overall_timeout_seconds=analysis.overall_timeout_seconds,
    )
    summarizer = Summarizer(
        llm=llm,
        model_name=settings.llm.summary_model,
        timeout_seconds=analysis.summary_timeout_seconds,
    )
    return AnalysisPipeline(
        fan_out=fan_out,
        summarizer=summarizer,
        max_chunk_size=analysis.max_chunk_size,
        context_store=context_store,
    )


def build_service_container(settings: Settings) -> ServiceContainer:
    """
    Construct all collaborator handles.

    Args:
        settings: Application settings

    Returns:
        ServiceContainer: Handles for app state

    Raises:
        ConfigurationError: If required credentials are missing
    """
    llm = LangChainChatClient(google_chat_model_factory(settings.llm))

    vector_index = None
    context_store = None
    if settings.analysis.use_vector_index:
        vs = settings.vector_store
        vector_index = QdrantVectorIndex(
            create_qdrant_client(vs),
            ensure_attempts=vs.ensure_attempts,
            scroll_page_size=vs.scroll_page_size,
            replication_factor=vs.replication_factor,
        )
        context_store = VectorContextStore(
            index=vector_index,
            embeddings=create_embeddings(vs, settings.llm),
            chunk_size=vs.split_chunk_size,
            chunk_overlap=vs.split_chunk_overlap,
        )
        logger.info("Vector index enrichment enabled")

    cache = RedisKVCache(
        create_redis_client(settings.cache),
        ttl_seconds=settings.cache.ttl_seconds,
        key_prefix=settings.cache.key_prefix,
    )
    engine = get_async_engine(settings.database)

    return ServiceContainer(
        settings=settings,
        cache=cache,
        pipeline=build_analysis_pipeline(settings, llm, context_store),
        engine=engine,
        session_factory=get_async_session_factory(engine),
        vector_index=vector_index,
    )


def get_services(request: Request) -> ServiceContainer:
    """Get the service container built at startup."""
    return request.app.state.services


def get_cache_service(services: ServiceContainer = Depends(get_services)) -> CacheService:
    """
    Get cache service instance.

    Args:
        services: Service container (injected)

    Returns:
        CacheService: Cache service bound to the shared Redis client
    """
    return CacheService(cache=services.cache)


def get_analysis_service(
    db: AsyncSession = Depends(get_async_db),
    services: ServiceContainer = Depends(get_services),
) -> AnalysisService:
    """
    Get analysis service instance.

    Args:
        db: Async database session (injected via Depends)
        services: Service container (injected)

    Returns:
        AnalysisService: Analysis service with the shared pipeline
    """
    return AnalysisService(
        db=db,
        pipeline=services.pipeline,
        persist_failed_summaries=services.settings.analysis.persist_failed_summaries,
    )
