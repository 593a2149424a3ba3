from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

cythonized_extensions = cythonize(
    [
        Extension(
            "picomsgpack.serde.*",
            ["src/picomsgpack/serde/msgpack_*.py"],
            extra_compile_args=[
                "-O3",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        ),
    ],
    compiler_directives={
        "language_level": 3,
        "boundscheck": False,
        "wraparound": False,
        "nonecheck": False,
        "initializedcheck": False,
        "annotation_typing": False,
    },
    build_dir="build/cython",
)

if __name__ == "__main__":
    setup(
        name="picomsgpack",
        version="0.1.0",
        description="MessagePack conversion for structured values, with brotli-compressed strings",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["Brotli>=1.0"],
        extras_require={"test": ["pytest", "msgpack>=1.0"]},
        ext_modules=cythonized_extensions,
    )
