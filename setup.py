from setuptools import find_packages, setup

package_name = 'find_point_on_path'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'setuptools',
        'pyyaml',
        'nudged',
    ],
    python_requires='>=3.11',
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='Arc-length parameterized point lookup on 2D waypoint paths',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'find_point_on_path = find_point_on_path.presentation.main:main',
        ],
    },
)
