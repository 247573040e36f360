from setuptools import setup, find_packages

exec(open('isobus/version.py').read())

description = open("README.rst").read()

setup(
    name="can-isobus",
    version=__version__,
    packages=find_packages(exclude=['docs', 'examples', 'test']),
    description="ISO 11783 / SAE J1939 NAME codec and CAN frame record",
    keywords="CAN ISOBUS ISO11783 SAE J1939 NAME",
    long_description=description,
    long_description_content_type='text/x-rst',
    license="MIT",
    platforms=["any"],
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering"
    ],
    install_requires=[
        "python-can>=4.0.0",
    ],
    extras_require={
        "test": ["pytest >= 6.2.5"],
    },
    include_package_data=True,
)
