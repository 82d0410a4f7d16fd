"""Errors raised while building samplers."""


class InvalidParameters(ValueError):
    """Raised when no regular bipartite graph fits the requested parameters.

    A regular graph needs as many variable stubs as constraint stubs, that is
    number_of_variables * variable_degree == number_of_constraints *
    constraint_degree. All four values are kept so callers can report them.
    """

    def __init__(
        self,
        number_of_variables: int,
        number_of_constraints: int,
        variable_degree: int,
        constraint_degree: int,
    ) -> None:
        self.number_of_variables = number_of_variables
        self.number_of_constraints = number_of_constraints
        self.variable_degree = variable_degree
        self.constraint_degree = constraint_degree
        super().__init__(
            f"can't sample a graph with {number_of_variables} variables of "
            f"degree {variable_degree} and {number_of_constraints} "
            f"constraints of degree {constraint_degree}"
        )

    def __reduce__(self):
        return (
            type(self),
            (
                self.number_of_variables,
                self.number_of_constraints,
                self.variable_degree,
                self.constraint_degree,
            ),
        )
