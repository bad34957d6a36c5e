"""
utils.util
----------

YAML 設定の読み込み、ロギング設定、設定からのリング解決など
dropmachine 全体で共有されるユーティリティ関数群。
"""

import logging
from pathlib import Path
from typing import Tuple

from omegaconf import DictConfig, ListConfig, OmegaConf

from dropmachine.enums.enums import Ring

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "config.yaml"


def config_loader(cfg_path: Path = DEFAULT_CONFIG_PATH) -> DictConfig | ListConfig:
    """YAML 設定ファイルを読み込み `OmegaConf` オブジェクトを返す。

    Args:
        cfg_path (Path, optional): YAML ファイルのパス。デフォルトは
            パッケージ同梱の `config/config.yaml`。

    Returns:
        OmegaConf: 読み込まれた DictConfig。
    """
    return OmegaConf.load(str(cfg_path))


def setup_logging(level: int = logging.INFO) -> None:
    """ルートロガーに `StreamHandler` を設定する。

    Args:
        level (int, optional): ログレベル。デフォルトは `logging.INFO`。
    """
    logger = logging.getLogger()
    logger.setLevel(level)
    # 既存ハンドラをクリア
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)


def setup_logging_from_config(cfg: DictConfig | ListConfig) -> int:
    """設定の `globals.logging.level` に従ってロギングを設定する。

    未知のレベル名は WARNING として扱う。

    Returns:
        int: 実際に設定したログレベル。
    """
    level_name = str(OmegaConf.select(cfg, "globals.logging.level", default="warning")).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    setup_logging(level=log_level)
    return log_level


def rings_from_config(cfg: DictConfig | ListConfig) -> Tuple[Ring, ...]:
    """設定の `machine.rings` に列挙された名前を Ring へ解決する。

    Args:
        cfg: OmegaConf 設定オブジェクト

    Returns:
        設定順に並んだ Ring のタプル。キーが無ければ全リング。

    Raises:
        UnknownMemberError: 未知のリング名が含まれる場合。
    """
    names = OmegaConf.select(cfg, "machine.rings")
    if names is None:
        rings = Ring.members()
        LOGGER.warning("cfg.machine.rings not found – fallback to all %d rings", len(rings))
        return rings

    rings = tuple(Ring.from_name(name) for name in names)
    LOGGER.info("Rings from config: %s", ", ".join(ring.name for ring in rings))
    return rings
