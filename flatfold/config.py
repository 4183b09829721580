import json

from flatfold.errors import ConfigError


COMPONENT_POLICIES = ("each", "single")


# --- Configuration ---
class Config:
    # 定理の定数
    KAWASAKI_ANGLE = 180
    MAEKAWA_DIFFERENCE = 2

    # diagnose() が返すエラーの上限
    MAX_ERRORS_TO_REPORT = 10

    # "each": 連結成分ごとに彩色する / "single": 連結成分が1つであることを要求する
    COMPONENT_POLICY = "each"

    # CreaseGraph 構築時に折り線の対称性を検証する
    CHECK_SYMMETRY = True

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not key.isupper() or not hasattr(Config, key):
                raise ConfigError(f"Unknown config key: '{key}'")
            # 上書き値はクラスの既定値と同じ型でなければならない (bool は int として扱わない)
            expected = type(getattr(Config, key))
            if type(value) is not expected:
                raise ConfigError(
                    f"Config key '{key}' must be of type {expected.__name__}, got {value!r}"
                )
            setattr(self, key, value)
        if self.COMPONENT_POLICY not in COMPONENT_POLICIES:
            raise ConfigError(
                f"COMPONENT_POLICY must be one of {COMPONENT_POLICIES}, got '{self.COMPONENT_POLICY}'"
            )

    @classmethod
    def from_file(cls, file_path):
        """JSONファイルから設定の上書き値を読み込む"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Cannot read config file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {file_path} must contain a JSON object")
        return cls(**data)

    def as_dict(self):
        return {key: getattr(self, key) for key in dir(Config) if key.isupper()}


def resolve_config(config):
    return config if config is not None else Config()
