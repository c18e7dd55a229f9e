import pyperf

from morsec import tomlish

DATA = "".join(
    "[section_{}]\n".format(n) + "".join(
        'key_{} = "value {}"\nnum_{} = {}\n'.format(i, i, i, i)
        for i in range(20)
    ) + "\n"
    for n in range(200)
)


runner = pyperf.Runner()
runner.bench_func("tomlish_loads", lambda: tomlish.loads(DATA))
