import random
import string


def random_strings(count, prefix, seed, length=16):
    rng = random.Random(seed)
    return [prefix + ''.join(rng.choice(string.ascii_lowercase) for _ in range(length))
            for _ in range(count)]
