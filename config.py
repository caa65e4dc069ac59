import os

from omegaconf import OmegaConf

from cube_model import INITIAL_FACE_COLORS, CubeState
from scramble import SCRAMBLE_POOL

DEFAULT_CONFIG = {
    'cube': {'colors': dict(INITIAL_FACE_COLORS)},
    'scramble': {'length': 25, 'pool': list(SCRAMBLE_POOL)},
    'player': {'interval': 0.25},
}


def load_config(path="config.yaml", overrides=None):
    """
    读取 YAML 配置并合并到默认值之上；文件不存在时只用默认值。
    overrides: 额外的 DictConfig / dict，例如 OmegaConf.from_cli()
    """
    config = OmegaConf.create(DEFAULT_CONFIG)
    if path is not None and os.path.exists(path):
        config = OmegaConf.merge(config, OmegaConf.load(path))
    if overrides is not None:
        config = OmegaConf.merge(config, overrides)
    if config.scramble.length < 0:
        raise ValueError(f"scramble.length 不能为负: {config.scramble.length}")
    if config.player.interval < 0:
        raise ValueError(f"player.interval 不能为负: {config.player.interval}")
    return config


def initial_state(config):
    """按配置中的面颜色构造复原态"""
    return CubeState.solved(OmegaConf.to_container(config.cube.colors, resolve=True))
