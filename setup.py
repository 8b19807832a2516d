from setuptools import find_packages, setup

package_name = 'arc_reparam'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    python_requires='>=3.8',
    install_requires=['setuptools', 'numpy', 'scipy'],
    extras_require={
        'test': ['pytest'],
        'plot': ['matplotlib'],
    },
    zip_safe=True,
    maintainer='shareef',
    maintainer_email='shareef@todo.todo',
    description='Adaptive arc-length reparameterization of planar parametric curves',
    license='TODO: License declaration',
    tests_require=['pytest'],
)
