import logging
from typing import Any, Optional, Union

from matweave.core.meta import DotStrategy
from matweave.core.rng import NormalSampler, SeedExpander

logger = logging.getLogger(__name__)


class Config:
    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "Config":
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_initialized"):
            self._initialized = True  # Prevents reinitialization
            self._random_seed: Optional[int] = None
            self._seed_stream: Optional[SeedExpander] = None
            self._use_jit = False
            self._dot_strategy = DotStrategy.DIRECT

    def set_seed(self, seed: Optional[int]) -> None:
        """
        For reproducability one can set a seed for random matrices.
        Every sampler handed out by `sampler()` afterwards is seeded from a
        deterministic stream derived from this seed. Passing None returns
        to clock seeding.

        Parameters
        ----------
        seed: Optional[int]
            Unsigned 64-bit seed, or None
        """
        if seed is None:
            self._random_seed = None
            self._seed_stream = None
            return
        self._seed_stream = SeedExpander.from_seed(seed)
        self._random_seed = seed

    @property
    def random_seed(self) -> Optional[int]:
        return self._random_seed

    @property
    def deterministic(self) -> bool:
        return self._seed_stream is not None

    def sampler(self, mean: float = 0.0, std_dev: float = 1.0) -> NormalSampler:
        """
        Returns a fresh normal sampler. It is clock seeded unless a seed
        was configured, in which case the next seed of the configured
        stream is used.
        """
        if self._seed_stream is None:
            logger.debug("Handing out a clock seeded sampler")
            return NormalSampler.from_time(mean=mean, std_dev=std_dev)
        return NormalSampler.from_seed(
            self._seed_stream.next_u64(), mean=mean, std_dev=std_dev
        )

    @property
    def use_jit(self) -> bool:
        return self._use_jit

    def set_use_jit(self, use_jit: bool) -> None:
        self._use_jit = bool(use_jit)

    @property
    def dot_strategy(self) -> DotStrategy:
        return self._dot_strategy

    @dot_strategy.setter
    def dot_strategy(self, strategy: Union[DotStrategy, str]) -> None:
        self._dot_strategy = DotStrategy(strategy)

    def set_dot_strategy(self, strategy: Union[DotStrategy, str]) -> None:
        self._dot_strategy = DotStrategy(strategy)


class Session:
    """
    Lightweight context manager to scope Config settings per run.

    Example:
        with Session(seed=0, dot_strategy="transposed"):
            ...
    Restores previous Config values on exit so tests/runs stay isolated.
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        use_jit: Optional[bool] = None,
        dot_strategy: Union[DotStrategy, str, None] = None,
    ) -> None:
        cfg = Config()
        self._prev = {
            "seed": cfg.random_seed,
            "seed_stream": cfg._seed_stream,  # type: ignore[attr-defined]
            "use_jit": cfg.use_jit,
            "dot_strategy": cfg.dot_strategy,
        }
        self._seed = seed
        self._use_jit = use_jit
        self._dot_strategy = dot_strategy
        self._cfg = cfg

    def __enter__(self) -> "Config":
        if self._seed is not None:
            self._cfg.set_seed(self._seed)
        if self._use_jit is not None:
            self._cfg.set_use_jit(self._use_jit)
        if self._dot_strategy is not None:
            self._cfg.set_dot_strategy(self._dot_strategy)
        return self._cfg

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cfg._random_seed = self._prev["seed"]  # type: ignore[attr-defined]
        self._cfg._seed_stream = self._prev["seed_stream"]  # type: ignore[attr-defined]
        self._cfg.set_use_jit(self._prev["use_jit"])
        self._cfg.set_dot_strategy(self._prev["dot_strategy"])
