from beastbound.battle.models import Creature


class DummyRng:
    """Scripted stand-in for random.Random.

    random() pops from `rolls` and falls back to `roll` once they run out;
    randint() answers the low end, the high end or the midpoint; choice()
    always takes the first element.
    """
    def __init__(self, roll=0.0, rolls=(), pick="low"):
        self.roll = roll
        self.rolls = list(rolls)
        self.pick = pick

    def random(self):
        if self.rolls:
            return self.rolls.pop(0)
        return self.roll

    def randint(self, a, b):
        if self.pick == "low":
            return a
        if self.pick == "high":
            return b
        return (a + b) // 2

    def choice(self, seq):
        return seq[0]


def beast(name="Glimfer", hp=50, max_hp=50, moves=("GlowPeck", "MoonMend"), level=6, species_id=None):
    return Creature(species_id=species_id or name.lower(), name=name, color="#8ef0c3",
                    max_hp=max_hp, hp=hp, moves=list(moves), level=level)
