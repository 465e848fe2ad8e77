"""Launch file for joy_gripper node (joystick gripper wrist/finger control)."""

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():
    """Generate launch description for joy_gripper node."""

    rover_name_arg = DeclareLaunchArgument(
        'rover_name',
        default_value='rover',
        description='Rover whose gripper receives the angle commands'
    )

    rover_select_topic_arg = DeclareLaunchArgument(
        'rover_select_topic',
        default_value='rover_select',
        description='Topic carrying the selected rover name (std_msgs/String)'
    )

    joy_topic_arg = DeclareLaunchArgument(
        'joy_topic',
        default_value='joy',
        description='Joystick topic (sensor_msgs/Joy)'
    )

    wrist_axis_arg = DeclareLaunchArgument(
        'wrist_axis',
        default_value='4',
        description='Axis index driving the wrist'
    )

    finger_axis_arg = DeclareLaunchArgument(
        'finger_axis',
        default_value='3',
        description='Axis index driving the fingers'
    )

    dead_zone_arg = DeclareLaunchArgument(
        'dead_zone',
        default_value='0.05',
        description='Stick values below this are treated as centered'
    )

    reapply_period_arg = DeclareLaunchArgument(
        'reapply_period_ms',
        default_value='100',
        description='Command re-publish period while a stick is held (ms)'
    )

    wrist_change_rate_arg = DeclareLaunchArgument(
        'wrist_change_rate',
        default_value='0.1',
        description='Fraction of the stick value added to the wrist angle per tick'
    )

    wrist_min_arg = DeclareLaunchArgument(
        'wrist_min',
        default_value='0.0',
        description='Minimum wrist angle (rad)'
    )

    wrist_max_arg = DeclareLaunchArgument(
        'wrist_max',
        default_value='1.0',
        description='Maximum wrist angle (rad)'
    )

    finger_change_rate_arg = DeclareLaunchArgument(
        'finger_change_rate',
        default_value='0.1',
        description='Fraction of the stick value added to the finger angle per tick'
    )

    finger_min_arg = DeclareLaunchArgument(
        'finger_min',
        default_value='0.0',
        description='Minimum finger angle (rad)'
    )

    finger_max_arg = DeclareLaunchArgument(
        'finger_max',
        default_value='2.0',
        description='Maximum finger angle (rad)'
    )

    joy_gripper_node = Node(
        package='joy_gripper',
        executable='joy_gripper_node',
        name='joy_gripper_node',
        output='screen',
        parameters=[{
            'rover_name': LaunchConfiguration('rover_name'),
            'joy_topic': LaunchConfiguration('joy_topic'),
            'rover_select_topic': LaunchConfiguration('rover_select_topic'),
            'wrist_axis': LaunchConfiguration('wrist_axis'),
            'finger_axis': LaunchConfiguration('finger_axis'),
            'dead_zone': LaunchConfiguration('dead_zone'),
            'reapply_period_ms': LaunchConfiguration('reapply_period_ms'),
            'wrist_change_rate': LaunchConfiguration('wrist_change_rate'),
            'wrist_min': LaunchConfiguration('wrist_min'),
            'wrist_max': LaunchConfiguration('wrist_max'),
            'finger_change_rate': LaunchConfiguration('finger_change_rate'),
            'finger_min': LaunchConfiguration('finger_min'),
            'finger_max': LaunchConfiguration('finger_max'),
        }]
    )

    return LaunchDescription([
        rover_name_arg,
        joy_topic_arg,
        rover_select_topic_arg,
        wrist_axis_arg,
        finger_axis_arg,
        dead_zone_arg,
        reapply_period_arg,
        wrist_change_rate_arg,
        wrist_min_arg,
        wrist_max_arg,
        finger_change_rate_arg,
        finger_min_arg,
        finger_max_arg,
        joy_gripper_node,
    ])
