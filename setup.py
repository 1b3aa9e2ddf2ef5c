from setuptools import setup


setup(
    name='basecalc',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Typed-literal base calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['basecalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'basecalc = basecalc.cli:main',
        ],
    },
    license='ISC',
)
