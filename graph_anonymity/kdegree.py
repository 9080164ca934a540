# k-degree anonymity by degree grouping, supergraph construction and random
# noise on failure.

import logging
import random as rn

from .algorithm import Algorithm, register, validate_graph, validate_k
from .degree import additional_degree_vector, anonymization_cost, degree_anonymization, degree_vector
from .errors import AnonymizationError
from .realization import RealizationFailure, supergraph

logger = logging.getLogger(__name__)

NOISE_ADDITION = 10
DEFAULT_MAX_ATTEMPTS = 1000


@register
class KDegree(Algorithm):
    """Make every degree in the graph shared by at least ``k`` vertices.

    The graph is modified in place. When the anonymised degrees cannot be
    realised, up to ``noise_addition - 1`` random edges are added to the
    graph and the whole procedure starts over. ``max_attempts`` bounds the
    number of realisation attempts; ``None`` retries forever.
    """

    name = "kdegree"

    def __init__(self, noise_addition=NOISE_ADDITION, max_attempts=DEFAULT_MAX_ATTEMPTS, seed=None, rng=None):
        if noise_addition < 1:
            raise ValueError(f"noise_addition must be at least 1, got {noise_addition}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.noise_addition = noise_addition
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else rn.Random(seed)
        self.attempts = 0
        self.failures = []

    def anonymize(self, graph, k):
        validate_graph(graph)
        k = validate_k(k)
        self.attempts = 0
        self.failures = []

        while True:
            self.attempts += 1
            logger.debug("Attempt number %d", self.attempts)
            result = self.attempt(graph, k)
            if not isinstance(result, RealizationFailure):
                logger.info("graph is %d-degree anonymous after %d attempt(s)", k, self.attempts)
                return result

            self.failures.append(result)
            logger.debug("not realised: %s", result.cause)
            if self.max_attempts is not None and self.attempts >= self.max_attempts:
                raise AnonymizationError(
                    f"no {k}-degree anonymous supergraph found in {self.attempts} attempts "
                    f"(last failure: {result.cause})"
                )
            self.add_noise(graph)

    # a single pass: degree vector, grouping, supergraph construction
    def attempt(self, graph, k):
        original = degree_vector(graph)
        anonymized = degree_anonymization(original, k)
        logger.debug("anonymisation cost %d", anonymization_cost(original, anonymized))
        additional = additional_degree_vector(original, anonymized)
        return supergraph(graph, additional, anonymized)

    # add a random number of random edges; a draw with equal endpoints adds nothing
    def add_noise(self, graph):
        vertices = graph.vertices()
        additions = self.rng.randrange(self.noise_addition)
        added = 0
        for _ in range(additions):
            u = vertices[self.rng.randrange(len(vertices))]
            v = vertices[self.rng.randrange(len(vertices))]
            if u == v or graph.has_edge(u, v):
                continue
            graph.add_edge(u, v)
            added += 1
        logger.debug("added %d noise edge(s)", added)
        return added


def anonymize(graph, k, **kwargs):
    return KDegree(**kwargs).anonymize(graph, k)
