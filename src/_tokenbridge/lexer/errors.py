class TokenizationError(Exception):
    """
    A token factory raises TokenizationError to reject the text matched by
    its rule. The lexicon then produces its error token for that text
    instead (however, it could be that the text is valid for a rule that
    matched the same length further down the lexicon).
    """

    pass
