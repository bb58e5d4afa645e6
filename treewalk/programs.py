"""Example programs built with the AST builders."""

from .ast import Block, Branch, assign, block, branch, ident, loop, minus, plus, times


def factorial_program() -> Block:
    """Compute 5! into ``factorial``.

    Equivalent to::

        factorial = 1;
        i = 5;
        while (i != 0) {
            factorial = factorial * i;
            i = i - 1;
        }
    """
    return block(
        assign('factorial', 1),
        assign('i', 5),
        loop(ident('i'), block(
            assign('factorial', times('factorial', 'i')),
            assign('i', minus('i', 1)),
        )),
    )


def book_program() -> Branch:
    # x and y are unbound, so the predicate is 0 and only z = 7 runs
    return branch(
        plus('x', 'y'),
        block(
            loop(ident('z'), assign('z', plus('z', 1))),
            assign('x', 8),
        ),
        assign('z', 7),
    )


EXAMPLES = {
    'factorial': factorial_program,
    'book': book_program,
}
