from __future__ import annotations

import datetime
import logging
from typing import Callable

from activity_digest.core.config import LOG_LEVEL, RunConfig, load_run_config
from activity_digest.core.errors import ActivityDigestError, ConfigurationError
from activity_digest.export.gist_store import GistStore
from activity_digest.models import RunResult
from activity_digest.processing.pipeline import build_default_pipeline
from activity_digest.processing.types import EventSource, LogFunc, SnippetStore
from activity_digest.sources.github_events import GitHubEventSource


def _log(message: str) -> None:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}")


def run(
    config: RunConfig,
    *,
    event_source: EventSource | None = None,
    store: SnippetStore | None = None,
    logger: LogFunc = _log,
    now_provider: Callable[[], datetime.datetime] | None = None,
) -> RunResult:
    """이벤트 조회 -> 다이제스트 생성 -> Gist 게시를 한 번 수행.

    조회가 실패하면 게시하지 않는다. 게시 실패 시 기존 Gist 내용은 유지된다.
    """
    owned: list = []
    if event_source is None:
        event_source = GitHubEventSource(
            token=config.events_token,
            api_base=config.api_base,
            timeout_sec=config.timeout_sec,
        )
        owned.append(event_source)

    pipeline = build_default_pipeline(
        config,
        event_source=event_source,
        logger=logger,
        now_provider=now_provider,
    )

    digest = None
    try:
        digest = pipeline.fetch_and_build(config.username)
        if config.dry_run:
            logger("DRY_RUN: Gist 업데이트 생략\n" + digest.content)
            return RunResult(ok=True, reason="dry run", digest=digest, published=False)

        if store is None:
            store = GistStore(
                token=config.gist_token,
                api_base=config.api_base,
                timeout_sec=config.timeout_sec,
                filename=config.gist_filename,
            )
            owned.append(store)
        logger(f"Gist {config.gist_id} 업데이트")
        store.update(config.gist_id, digest.content)
        logger("✅ Gist updated!")
        return RunResult(ok=True, digest=digest, published=True)
    except ActivityDigestError as e:
        logger(f"❌ 오류 발생: {e}")
        return RunResult(ok=False, reason=str(e), digest=digest)
    finally:
        for client in owned:
            client.close()


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _log("프로그램 시작")
    try:
        config = load_run_config()
    except ConfigurationError as e:
        _log(f"❌ 설정 오류: {e}")
        return 1
    return run(config).exit_code


if __name__ == "__main__":
    raise SystemExit(main())
