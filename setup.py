from setuptools import find_packages, setup
import os
from glob import glob

package_name = 'joy_gripper'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.py')),
    ],
    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='User',
    maintainer_email='user@example.com',
    description='Joystick control of rover gripper wrist and finger angles',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'joy_gripper_node = joy_gripper.joy_gripper_node:main',
        ],
    },
)
