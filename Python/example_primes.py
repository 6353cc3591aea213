from generators import from_, fibs
from stream import cons


def sieve(stream):
    prime = stream.head
    return cons(lambda: prime,
                lambda: sieve(stream.tail.filter(lambda n: n % prime != 0)))


def primes():
    return sieve(from_(2))


def even_fibs():
    return fibs().filter(lambda n: n % 2 == 0)


if __name__ == "__main__":
    print("primes:", primes().take(20).to_list())
    print("even fibonacci numbers:", even_fibs().take(10).to_list())
    print("first prime above 100:", primes().find(lambda p: p > 100).get())
