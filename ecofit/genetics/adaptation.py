"""
Adaptations of an organism and their evaluation against an environment.

An ``Adaptation`` is an organism's scoring rule for one factor.  An
``Adaptatype`` is the organism's full set of adaptations; it matches each
adaptation to the environment entry of the same factor name, scores every
match and blends the results into one fitness.

Evaluation is all-or-nothing: the first failing adaptation (in adaptatype
order) aborts the evaluation and no partial fitness is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, List, Mapping, Optional, Tuple, TypeVar, cast

from loguru import logger

from ..exceptions import EcoFitError, EvaluationError, NoMatchingFactorsError
from ..utils.audit import NULL_AUDITOR, Auditor
from .blend import Blend, multiplicative_blend
from .ecology import EcoFactor, EcoFitness, Factor
from .fitness import Fitness

if TYPE_CHECKING:
    from ..context import EvaluationContext

X = TypeVar("X")

Environment = Mapping[str, EcoFactor[X]]


@dataclass(frozen=True)
class Adaptation(Generic[X]):
    """Binds a factor to the capability that scores it."""

    factor: Factor
    eco_fitness: EcoFitness[X]

    def __call__(self, eco_factor: EcoFactor[X]) -> Fitness:
        return self.eco_fitness(eco_factor)

    def __repr__(self) -> str:
        return f"Adaptation({self.factor}, {self.eco_fitness!r})"


@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of an evaluation: either a fitness or the error that prevented it."""

    fitness: Optional[Fitness] = None
    error: Optional[EcoFitError] = None

    def __post_init__(self) -> None:
        if (self.fitness is None) == (self.error is None):
            raise ValueError("An outcome holds exactly one of fitness or error.")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Fitness:
        """Return the fitness or raise the stored error."""
        if self.error is not None:
            raise self.error
        return cast(Fitness, self.fitness)

    def fitness_or(self, default: Fitness) -> Fitness:
        return self.fitness if self.fitness is not None else default


@dataclass(frozen=True)
class Adaptatype(Generic[X]):
    """The ordered adaptations making up an organism's evaluable phenotype."""

    adaptations: Tuple[Adaptation[X], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "adaptations", tuple(self.adaptations))

    @property
    def factor_names(self) -> List[str]:
        return [adaptation.factor.name for adaptation in self.adaptations]

    def match(self, environment: Environment) -> List[Tuple[Adaptation[X], EcoFactor[X]]]:
        """
        Pair each adaptation with the environment entry sharing its factor name.

        Adaptatype order is preserved and unmatched adaptations are dropped.

        Raises
        ------
        NoMatchingFactorsError
            If not a single adaptation finds its factor in ``environment``.
        """

        pairs = [
            (adaptation, environment[adaptation.factor.name])
            for adaptation in self.adaptations
            if adaptation.factor.name in environment
        ]
        if not pairs:
            raise NoMatchingFactorsError(environment.keys(), self.factor_names)
        return pairs

    def fitness(
        self,
        environment: Environment,
        blend: Optional[Blend] = None,
        *,
        context: Optional["EvaluationContext"] = None,
    ) -> Fitness:
        """
        Evaluate and blend the fitness of each matched adaptation.

        Parameters
        ----------
        environment : Mapping[str, EcoFactor]
            Factor names mapped to the environment's values for them.
        blend : callable, optional
            Reduces the ordered fitness values to one.  Defaults to the
            context's blend, then to :func:`multiplicative_blend`.
        context : EvaluationContext, optional
            Supplies the auditor and default blend.

        Raises
        ------
        NoMatchingFactorsError
            If no adaptation matches the environment.
        EvaluationError
            If any matched adaptation fails (the first failure is surfaced), or
            if the blend fails or does not return a ``Fitness``.
        """

        auditor = context.auditor if context is not None else NULL_AUDITOR
        if blend is None:
            blend = context.blend if context is not None else multiplicative_blend

        try:
            pairs = self.match(environment)
        except NoMatchingFactorsError as exc:
            auditor.failure("matched pairs", exc)
            raise
        auditor.audit("matched pairs", pairs)
        fitnesses = [self._invoke(adaptation, eco_factor, auditor) for adaptation, eco_factor in pairs]
        return auditor.audit("blended fitness", self._blend(blend, fitnesses, auditor))

    def evaluate(
        self,
        environment: Environment,
        blend: Optional[Blend] = None,
        *,
        context: Optional["EvaluationContext"] = None,
    ) -> EvaluationOutcome:
        """Same as :meth:`fitness` but returns failures as an :class:`EvaluationOutcome`."""
        try:
            return EvaluationOutcome(fitness=self.fitness(environment, blend, context=context))
        except EcoFitError as exc:
            logger.debug("Adaptatype evaluation failed: {}", exc)
            return EvaluationOutcome(error=exc)

    @staticmethod
    def _invoke(adaptation: Adaptation[X], eco_factor: EcoFactor[X], auditor: Auditor) -> Fitness:
        name = adaptation.factor.name
        label = f"{adaptation!r} on {name}={eco_factor.value!r}"
        try:
            result = adaptation(eco_factor)
        except EvaluationError as exc:
            auditor.failure(label, exc)
            raise
        except Exception as exc:
            error = EvaluationError(
                f"Adaptation for factor '{name}' failed: {exc}",
                cause=exc,
                context={"factor": name, "value": eco_factor.value},
            )
            auditor.failure(label, error)
            raise error from exc
        if not isinstance(result, Fitness):
            error = EvaluationError(
                f"Adaptation for factor '{name}' returned {type(result).__name__}, expected Fitness.",
                context={"factor": name, "value": eco_factor.value},
            )
            auditor.failure(label, error)
            raise error
        return auditor.audit(label, result)

    @staticmethod
    def _blend(blend: Blend, fitnesses: List[Fitness], auditor: Auditor) -> Fitness:
        name = getattr(blend, "__name__", repr(blend))
        try:
            result = blend(fitnesses)
        except EcoFitError as exc:
            auditor.failure("blended fitness", exc)
            raise
        except Exception as exc:
            error = EvaluationError(f"Blend '{name}' failed: {exc}", cause=exc, context={"blend": name})
            auditor.failure("blended fitness", error)
            raise error from exc
        if not isinstance(result, Fitness):
            error = EvaluationError(
                f"Blend '{name}' returned {type(result).__name__}, expected Fitness.",
                context={"blend": name},
            )
            auditor.failure("blended fitness", error)
            raise error
        return result

    def __len__(self) -> int:
        return len(self.adaptations)

    def __repr__(self) -> str:
        return f"Adaptatype({list(self.adaptations)!r})"


__all__ = ["Adaptation", "Adaptatype", "EvaluationOutcome", "Environment"]
