from os.path import abspath, dirname, exists, join

from setuptools import setup

long_description = None
if exists("README.md"):
    with open("README.md") as file:
        long_description = file.read()


def read_requirements(filename):
    with open(abspath(join(dirname(__file__), filename))) as file:
        return [
            req.strip() for req in file if req.strip() and not req.startswith("#")
        ]


install_reqs = read_requirements("requirements.txt")
test_reqs = read_requirements("requirements-dev.txt")

setup(
    name="m3u8reader",
    version="0.1.0",
    license="MIT",
    zip_safe=False,
    include_package_data=True,
    install_requires=install_reqs,
    extras_require={"test": test_reqs},
    packages=["m3u8reader"],
    entry_points={"console_scripts": ["m3u8reader=m3u8reader.__main__:main"]},
    description="Read HLS m3u8 playlists into an ordered item model",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
)
