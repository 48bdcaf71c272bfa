"""配置管理器类"""

import copy
import json
import os
from typing import Any, Dict, Optional, Type, Union, cast

from loguru import logger

from ..constants import CONFIG_ENV_VAR, CONFIG_FILE, DEFAULT_RENDER_CONFIG, ERROR_MESSAGES, RenderConfig


class ConfigError(Exception):
    """配置错误"""

    pass


ValidationStructure = Dict[str, Union[Type[Any], 'ValidationStructure']]


def generate_validation_structure(config_template: Dict[str, Any]) -> ValidationStructure:
    """
    从配置模板生成验证结构

    Args:
        config_template: 配置模板

    Returns:
        ValidationStructure: 验证结构
    """
    validation_structure: ValidationStructure = {}

    for key, value in config_template.items():
        if isinstance(value, dict):
            validation_structure[key] = generate_validation_structure(value)
        elif isinstance(value, list):
            validation_structure[key] = list
        elif value is None:
            validation_structure[key] = str
        else:
            validation_structure[key] = type(value)

    return validation_structure


def recursive_update(current: Dict[str, Any], updates: Dict[str, Any]) -> None:
    """递归合并配置"""
    for key, value in updates.items():
        if key in current and isinstance(value, dict) and isinstance(current[key], dict):
            recursive_update(current[key], value)
        else:
            current[key] = value


class ConfigManager:
    """配置管理器类，用于加载渲染配置"""

    config_file: Optional[str]
    config: RenderConfig
    REQUIRED_CONFIG_FIELDS: ValidationStructure

    def __init__(self, config_file: Optional[str] = None) -> None:
        """
        初始化配置管理器

        Args:
            config_file: 配置文件路径，为None时依次查找环境变量和当前目录
        """
        self.config_file = config_file
        self.config = cast(RenderConfig, copy.deepcopy(DEFAULT_RENDER_CONFIG))
        self.REQUIRED_CONFIG_FIELDS = generate_validation_structure(cast(Dict[str, Any], DEFAULT_RENDER_CONFIG))

    def find_config_file(self) -> Optional[str]:
        """
        查找配置文件

        Returns:
            Optional[str]: 配置文件路径，未找到时返回None

        Raises:
            ConfigError: 显式指定的配置文件不存在时抛出
        """
        if self.config_file:
            if not os.path.exists(self.config_file):
                raise ConfigError(f"配置文件不存在: {self.config_file}")
            return self.config_file

        env_file = os.environ.get(CONFIG_ENV_VAR)
        if env_file:
            if not os.path.exists(env_file):
                raise ConfigError(f"配置文件不存在: {env_file} (来自 {CONFIG_ENV_VAR})")
            return env_file

        local_file = os.path.join(os.getcwd(), CONFIG_FILE)
        if os.path.exists(local_file):
            return local_file
        return None

    def load_config(self) -> RenderConfig:
        """
        加载配置文件并合并到默认配置上

        Returns:
            RenderConfig: 加载的配置

        Raises:
            ConfigError: 配置加载失败时抛出
        """
        config_file = self.find_config_file()
        if config_file is None:
            logger.debug("未找到配置文件，使用默认配置")
            return self.config

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                updates = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"加载配置文件失败: {config_file}: {e}") from e

        if not isinstance(updates, dict):
            raise ConfigError(ERROR_MESSAGES["config_validation"].format("顶层应为对象"))

        recursive_update(cast(Dict[str, Any], self.config), updates)
        self.validate_config()
        logger.debug(f"已加载配置文件: {config_file}")
        return self.config

    def validate_config(self) -> None:
        """
        验证配置的完整性和正确性

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        try:
            self._validate_config_structure(cast(Dict[str, Any], self.config), self.REQUIRED_CONFIG_FIELDS)
        except ConfigError as e:
            raise ConfigError(ERROR_MESSAGES["config_validation"].format(e)) from e

    def _validate_config_structure(self, config: Dict[str, Any], required: ValidationStructure) -> None:
        """
        递归验证配置结构

        Args:
            config: 要验证的配置
            required: 必需的配置结构

        Raises:
            ConfigError: 配置结构验证失败时抛出
        """
        for key, value_type in required.items():
            if key not in config:
                raise ConfigError(f"缺少必需的配置项: {key}")

            if isinstance(value_type, dict):
                if not isinstance(config[key], dict):
                    raise ConfigError(f"配置项类型错误: {key} 应为字典")
                self._validate_config_structure(config[key], value_type)
            elif not isinstance(config[key], value_type):
                raise ConfigError(f"配置项类型错误: {key} 应为 {value_type.__name__}")
