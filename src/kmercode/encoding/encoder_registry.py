# Used for creating an Encoder from a parsed YAML configuration


from kmercode.encoding.encoder import Encoder, DEFAULT_WORD_LENGTH, DEFAULT_MAX_WORD_LENGTH
from kmercode.exceptions import ConfigurationError


class EncoderRegistry:
    """A small factory that builds encoders from config dictionaries."""

    _defaults = {
        'word_length': DEFAULT_WORD_LENGTH,
        'max_word_length': DEFAULT_MAX_WORD_LENGTH,
    }

    @classmethod
    def get(cls, conf=None, **overrides):
        """
        Builds an Encoder from the 'encoder' block of the configuration.
        Keyword overrides (e.g. from CLI flags) win over the file values; None means unset.
        """
        params = cls.encoder_params(conf)
        params.update({key: value for key, value in overrides.items() if value is not None})
        return Encoder(**params)

    @classmethod
    def encoder_params(cls, conf):
        params = cls._defaults.copy()
        if not conf:
            return params
        if not isinstance(conf, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(conf).__name__}.")

        enc_conf = conf.get('encoder') or {}
        if not isinstance(enc_conf, dict):
            raise ConfigurationError("The 'encoder' block must be a mapping.")

        unknown = set(enc_conf) - set(cls._defaults)
        if unknown:
            raise ConfigurationError(
                f"Unknown encoder settings: {sorted(unknown)}. Available: {list(cls._defaults.keys())}"
            )

        params.update(enc_conf)
        return params
