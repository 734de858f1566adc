import asyncio
import logging
import signal

from .core.config import load_all_configs
from .core.state import SharedState, StateStore
from .fetch_data.graph import GraphClient
from .fetch_data.ledger import LedgerClient
from .monitors import run_monitor
from .telegram.TG_bot import TG_bot
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def install_shutdown_handlers(shutdown: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown.set)
        except NotImplementedError:
            # no signal handlers on this platform's loop, Ctrl+C still raises KeyboardInterrupt
            pass


async def main(dotenv_path: str = ".env", config_path: str = "config.yaml") -> None:
    env, config = load_all_configs(dotenv_path=dotenv_path, config_path=config_path)

    setup_logging(
        log_file_prefix=config.logging.log_file_prefix,
        log_dir=config.logging.log_dir,
        backup_count=config.logging.backup_count,
        log_level=env.LOG_LEVEL,
    )

    shared = SharedState.from_store(StateStore(config.state.path))

    sources = config.sources
    graph = GraphClient(sources.graph_url, timeout=sources.request_timeout_sec)
    ledger = LedgerClient(
        sources.rpc_url,
        sources.contract_address,
        timeout=sources.request_timeout_sec,
    )
    bot = TG_bot.from_env(name="sophon", env_config=env)

    shutdown = asyncio.Event()
    install_shutdown_handlers(shutdown)

    try:
        await run_monitor(config, shared, graph, ledger, bot, shutdown)
    finally:
        await graph.close()
        await ledger.close()
        await bot.close()
        logger.info("sophon stopped")


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
