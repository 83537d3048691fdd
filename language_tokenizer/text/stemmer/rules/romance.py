"""
Actions shared by the Spanish, Portuguese and Italian rule tables.
"""

from language_tokenizer.text.stemmer.engine import Action, StemState


def then_strip(*followers: str) -> Action:
    """
    Delete the suffix in R2, then the first of `followers` it leaves behind, if in R2.
    """
    def action(state: StemState, suffix: str) -> bool:
        if not state.in_region(suffix, 'r2'):
            return False
        state.delete(suffix)
        for follower in followers:
            if state.ends(follower):
                state.strip(follower, 'r2')
                break
        return True
    return action


def amente(*followers: str) -> Action:
    """
    Delete 'amente' in R1, then one of `followers` in R2.

    A removed 'iv' also takes a preceding 'at' (in R2) with it.
    """
    def action(state: StemState, suffix: str) -> bool:
        if not state.in_region(suffix, 'r1'):
            return False
        state.delete(suffix)
        for follower in followers:
            if state.ends(follower):
                if state.strip(follower, 'r2') and follower == 'iv':
                    state.strip('at', 'r2')
                break
        return True
    return action


def strip_in_rv_after(letter: str, preceding: str):
    """Delete a final `letter` that follows `preceding`, when the letter is in RV."""
    def step(state: StemState) -> bool:
        if state.ends(letter) and state.preceding(letter).endswith(preceding):
            return state.strip(letter, 'rv')
        return False
    return step
