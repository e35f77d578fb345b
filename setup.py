from setuptools import setup, find_packages

setup(
    name='shapeforge',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A Python library for composing 2D SDF shapes and compiling them to GLSL.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/shapeforge',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'shapeforge': ['glsl/*.glsl'],
    },
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
    ],
    python_requires='>=3.8',
)
